"""Standalone scalar predicates used by the section validators.

Checkers never touch the diagnostic sink.  Each returns a :class:`CheckResult`
carrying the message and the line to report; the caller decides whether to
record it.
"""

from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import dataclass

from podcheck.models.nodes import Node, ScalarKind, ScalarNode

_IDENTIFIER_RE = re.compile(r"[a-z0-9]+(?:_[a-z0-9]+)*")

_INT_PREFIXES = (("0x", 16), ("0o", 8), ("0b", 2))


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single scalar check."""

    ok: bool
    message: str = ""
    line: int = 0

    @classmethod
    def passed(cls) -> CheckResult:
        return cls(ok=True)

    @classmethod
    def failed(cls, node: Node, message: str) -> CheckResult:
        return cls(ok=False, message=message, line=node.line)


def parse_int_literal(text: str) -> int:
    """Convert a YAML integer literal (decimal, hex, octal, binary, ``_`` separators).

    Raises ``ValueError`` for anything else.
    """
    cleaned = text.replace("_", "")
    sign = -1 if cleaned.startswith("-") else 1
    digits = cleaned.lstrip("+-")
    lowered = digits.lower()
    for prefix, base in _INT_PREFIXES:
        if lowered.startswith(prefix):
            return sign * int(digits[2:], base)
    return sign * int(digits, 10)


def check_scalar(field: str, node: Node) -> CheckResult:
    if not isinstance(node, ScalarNode):
        return CheckResult.failed(node, f"{field} must be string")
    return CheckResult.passed()


def check_int_range(
    field: str, node: Node, minimum: int, maximum: int | None = None
) -> CheckResult:
    """Integer-kind scalar within ``[minimum, maximum]``.

    The kind assigned by the parser is authoritative: a quoted ``"80"`` is a
    string and fails, even though it would convert cleanly.
    """
    if not isinstance(node, ScalarNode) or node.kind != ScalarKind.INTEGER:
        return CheckResult.failed(node, f"{field} must be int")
    try:
        value = parse_int_literal(node.value)
    except ValueError:
        return CheckResult.failed(node, f"{field} must be int")
    if value < minimum or (maximum is not None and value > maximum):
        return CheckResult.failed(node, f"{field} value out of range")
    return CheckResult.passed()


def quantity_pattern(units: Collection[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(u) for u in sorted(units, key=len, reverse=True))
    return re.compile(rf"[0-9]+(?:{alternatives})")


def check_quantity(field: str, node: Node, units: Collection[str]) -> CheckResult:
    """Digits followed by exactly one unit suffix from *units*, e.g. ``512Mi``."""
    if not isinstance(node, ScalarNode):
        return CheckResult.failed(node, f"{field} must be string")
    if not quantity_pattern(units).fullmatch(node.value):
        return CheckResult.failed(node, f"{field} has invalid format '{node.value}'")
    return CheckResult.passed()


def check_tagged_reference(field: str, node: Node, prefix: str) -> CheckResult:
    """``<prefix><name>:<tag>`` with non-empty name and tag."""
    if not isinstance(node, ScalarNode):
        return CheckResult.failed(node, f"{field} must be string")
    text = node.value
    rest = text[len(prefix) :] if text.startswith(prefix) else None
    if rest is None or not _has_inner_colon(rest):
        return CheckResult.failed(node, f"{field} has invalid format '{text}'")
    return CheckResult.passed()


def _has_inner_colon(text: str) -> bool:
    return ":" in text[1:-1]


def check_identifier(field: str, node: Node) -> CheckResult:
    """Lowercase alphanumerics separated by single underscores."""
    if not isinstance(node, ScalarNode):
        return CheckResult.failed(node, f"{field} must be string")
    if not _IDENTIFIER_RE.fullmatch(node.value):
        return CheckResult.failed(node, f"{field} has invalid format '{node.value}'")
    return CheckResult.passed()


def check_enum(field: str, node: Node, allowed: Collection[str]) -> CheckResult:
    if not isinstance(node, ScalarNode):
        return CheckResult.failed(node, f"{field} must be string")
    if node.value not in allowed:
        return CheckResult.failed(node, f"{field} has unsupported value '{node.value}'")
    return CheckResult.passed()
