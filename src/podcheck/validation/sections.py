"""Section validators for the fixed Pod schema.

Each validator takes the node for its section (already known to be present)
and writes into the shared context.  Failures never stop the walk: a node of
the wrong shape produces one diagnostic and only its own subtree is skipped.
"""

from __future__ import annotations

from typing import TypeGuard

from podcheck.models.nodes import MappingNode, Node, ScalarNode, SequenceNode
from podcheck.validation.accessor import evaluate_field, lookup
from podcheck.validation.checkers import (
    CheckResult,
    check_enum,
    check_identifier,
    check_int_range,
    check_quantity,
    check_scalar,
    check_tagged_reference,
)
from podcheck.validation.context import ValidationContext

# ---------------------------------------------------------------------------
# Schema constants
# ---------------------------------------------------------------------------

API_VERSION = "v1"
KIND = "Pod"
OS_NAMES = ("linux", "windows")
PROTOCOLS = ("TCP", "UDP")
IMAGE_REGISTRY_PREFIX = "registry.bigbrother.io/"
MEMORY_UNITS = ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei")
PORT_MIN = 1
PORT_MAX = 65535
PROBE_FIELDS = ("readinessProbe", "livenessProbe")
RESOURCE_SECTIONS = ("limits", "requests")


def _record(ctx: ValidationContext, result: CheckResult) -> bool:
    if not result.ok:
        ctx.report(result.line, result.message)
    return result.ok


def _require_mapping(ctx: ValidationContext, node: Node, field: str) -> TypeGuard[MappingNode]:
    if not isinstance(node, MappingNode):
        ctx.report(node.line, f"{field} must be object")
        return False
    return True


def _check_fixed_value(ctx: ValidationContext, node: Node, field: str, expected: str) -> None:
    if not isinstance(node, ScalarNode):
        ctx.report(node.line, f"{field} must be string")
    elif node.value != expected:
        ctx.report(node.line, f"{field} has unsupported value '{node.value}'")


# ---------------------------------------------------------------------------
# Top level
# ---------------------------------------------------------------------------


def validate_document(ctx: ValidationContext, doc: Node) -> None:
    """Validate one document: apiVersion, kind, metadata, spec in that order."""
    if not isinstance(doc, MappingNode):
        ctx.report(doc.line, "top-level document must be a mapping (object)")
        return

    api_version = evaluate_field(ctx, doc, "apiVersion")
    if api_version is not None:
        _check_fixed_value(ctx, api_version, "apiVersion", API_VERSION)

    kind = evaluate_field(ctx, doc, "kind")
    if kind is not None:
        _check_fixed_value(ctx, kind, "kind", KIND)

    metadata = evaluate_field(ctx, doc, "metadata")
    if metadata is not None:
        validate_metadata(ctx, metadata)

    spec = evaluate_field(ctx, doc, "spec")
    if spec is not None:
        validate_spec(ctx, spec)


def validate_metadata(ctx: ValidationContext, node: Node) -> None:
    if not _require_mapping(ctx, node, "metadata"):
        return

    name = evaluate_field(ctx, node, "name", non_empty=True)
    if name is not None:
        _record(ctx, check_scalar("name", name))

    namespace = evaluate_field(ctx, node, "namespace", required=False)
    if namespace is not None:
        _record(ctx, check_scalar("namespace", namespace))

    labels = evaluate_field(ctx, node, "labels", required=False)
    if labels is not None and _require_mapping(ctx, labels, "labels"):
        for key, value in labels.entries:
            _record(ctx, check_scalar("labels key", key))
            _record(ctx, check_scalar("labels value", value))


# ---------------------------------------------------------------------------
# Pod spec
# ---------------------------------------------------------------------------


def validate_spec(ctx: ValidationContext, node: Node) -> None:
    if not _require_mapping(ctx, node, "spec"):
        return

    os_node = evaluate_field(ctx, node, "os", required=False)
    if os_node is not None:
        validate_os(ctx, os_node)

    containers = evaluate_field(ctx, node, "containers")
    if containers is None:
        return
    if not isinstance(containers, SequenceNode):
        ctx.report(containers.line, "containers must be array")
        return
    if not containers.items:
        ctx.report(containers.line, "containers must not be empty")
    for item in containers.items:
        validate_container(ctx, item)


def validate_os(ctx: ValidationContext, node: Node) -> None:
    """``os: linux`` or ``os: {name: linux}``.  An empty value is left unchecked."""
    if isinstance(node, ScalarNode):
        name_node = node
    elif isinstance(node, MappingNode):
        resolved = evaluate_field(ctx, node, "name", label="os.name")
        if resolved is None:
            return
        if not isinstance(resolved, ScalarNode):
            ctx.report(resolved.line, "os.name must be string")
            return
        name_node = resolved
    else:
        ctx.report(node.line, "os must be string or object")
        return
    if name_node.is_empty:
        return
    _record(ctx, check_enum("os", name_node, OS_NAMES))


def validate_container(ctx: ValidationContext, node: Node) -> None:
    """One entry of ``spec.containers``; non-mappings are skipped after one diagnostic."""
    if not isinstance(node, MappingNode):
        ctx.report(node.line, "container must be object")
        return

    name = evaluate_field(ctx, node, "name", non_empty=True)
    if name is not None:
        _record(ctx, check_identifier("name", name))

    image = evaluate_field(ctx, node, "image", non_empty=True)
    if image is not None:
        _record(ctx, check_tagged_reference("image", image, IMAGE_REGISTRY_PREFIX))

    ports = evaluate_field(ctx, node, "ports", required=False)
    if ports is not None:
        validate_ports(ctx, ports)

    for probe_field in PROBE_FIELDS:
        probe = evaluate_field(ctx, node, probe_field, required=False)
        if probe is not None:
            validate_probe(ctx, probe, probe_field)

    resources = evaluate_field(ctx, node, "resources")
    if resources is not None:
        validate_resources(ctx, resources)


# ---------------------------------------------------------------------------
# Container sub-sections
# ---------------------------------------------------------------------------


def validate_ports(ctx: ValidationContext, node: Node) -> None:
    if not isinstance(node, SequenceNode):
        ctx.report(node.line, "ports must be array")
        return
    for entry in node.items:
        if not isinstance(entry, MappingNode):
            ctx.report(entry.line, "ports entry must be object")
            continue
        container_port = evaluate_field(ctx, entry, "containerPort")
        if container_port is not None:
            _record(ctx, check_int_range("containerPort", container_port, PORT_MIN, PORT_MAX))
        protocol = evaluate_field(ctx, entry, "protocol", required=False)
        if protocol is not None:
            _record(ctx, check_enum("protocol", protocol, PROTOCOLS))


def validate_probe(ctx: ValidationContext, node: Node, field: str) -> None:
    """``readinessProbe`` / ``livenessProbe``: an ``httpGet`` with path and port."""
    if not _require_mapping(ctx, node, field):
        return
    http_get = evaluate_field(ctx, node, "httpGet")
    if http_get is None or not _require_mapping(ctx, http_get, "httpGet"):
        return

    path = evaluate_field(ctx, http_get, "path", non_empty=True)
    if path is not None:
        if not isinstance(path, ScalarNode):
            ctx.report(path.line, "path must be string")
        elif not path.value.startswith("/"):
            ctx.report(path.line, f"path has invalid format '{path.value}'")

    port = evaluate_field(ctx, http_get, "port")
    if port is not None:
        _record(ctx, check_int_range("port", port, PORT_MIN, PORT_MAX))


def validate_resources(ctx: ValidationContext, node: Node) -> None:
    if not _require_mapping(ctx, node, "resources"):
        return
    for section in RESOURCE_SECTIONS:
        quantities = lookup(node, section)
        if quantities is not None and _require_mapping(ctx, quantities, section):
            validate_quantities(ctx, quantities)


def validate_quantities(ctx: ValidationContext, node: MappingNode) -> None:
    """``cpu`` (non-negative int) then ``memory`` (binary-unit quantity)."""
    cpu = lookup(node, "cpu")
    if cpu is not None:
        _record(ctx, check_int_range("cpu", cpu, 0))
    memory = lookup(node, "memory")
    if memory is not None:
        _record(ctx, check_quantity("memory", memory, MEMORY_UNITS))


def describe_schema() -> dict[str, object]:
    """The fixed schema constants, for the API and MCP surfaces."""
    return {
        "apiVersion": API_VERSION,
        "kind": KIND,
        "osNames": list(OS_NAMES),
        "protocols": list(PROTOCOLS),
        "imageRegistryPrefix": IMAGE_REGISTRY_PREFIX,
        "memoryUnits": list(MEMORY_UNITS),
        "portRange": [PORT_MIN, PORT_MAX],
        "probes": list(PROBE_FIELDS),
        "resourceSections": list(RESOURCE_SECTIONS),
    }
