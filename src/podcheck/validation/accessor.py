"""Mapping lookup and the presence-only field rule."""

from __future__ import annotations

from podcheck.models.nodes import MappingNode, Node, ScalarNode
from podcheck.validation.context import ValidationContext


def lookup_entry(node: Node | None, key: str) -> tuple[Node, Node] | None:
    """Return the first ``(key_node, value_node)`` whose key equals *key*.

    Anything that is not a mapping (including ``None``) has no entries.
    """
    if not isinstance(node, MappingNode):
        return None
    for key_node, value_node in node.entries:
        if isinstance(key_node, ScalarNode) and key_node.value == key:
            return key_node, value_node
    return None


def lookup(node: Node | None, key: str) -> Node | None:
    """Return the value stored under *key*, or ``None``."""
    entry = lookup_entry(node, key)
    return entry[1] if entry is not None else None


def evaluate_field(
    ctx: ValidationContext,
    parent: MappingNode,
    field: str,
    *,
    required: bool = True,
    non_empty: bool = False,
    label: str | None = None,
) -> Node | None:
    """Resolve *field* on *parent*, reporting it when required but missing.

    Only presence is checked here.  With ``non_empty`` an empty or null
    scalar counts as missing and is reported at the key's line.  *label*
    overrides the field name used in the message.
    """
    name = label or field
    entry = lookup_entry(parent, field)
    if entry is None:
        if required:
            ctx.report(parent.line, f"{name} is required")
        return None
    key_node, value_node = entry
    if non_empty and isinstance(value_node, ScalarNode) and value_node.is_empty:
        if required:
            ctx.report(key_node.line, f"{name} is required")
        return None
    return value_node
