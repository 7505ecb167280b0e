"""Immutable document tree nodes. Every node remembers the line it came from."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ScalarKind(StrEnum):
    """Primitive kind inferred from YAML syntax, never from coercion."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class ScalarNode:
    """A literal value together with the kind the parser assigned to it."""

    value: str
    kind: ScalarKind
    line: int

    @property
    def is_empty(self) -> bool:
        return self.kind == ScalarKind.NULL or self.value == ""


@dataclass(frozen=True)
class SequenceNode:
    """An ordered list of child nodes."""

    items: tuple[Node, ...] = field(default_factory=tuple)
    line: int = 1


@dataclass(frozen=True)
class MappingNode:
    """Ordered ``(key, value)`` pairs, kept exactly as the parser produced them."""

    entries: tuple[tuple[Node, Node], ...] = field(default_factory=tuple)
    line: int = 1


Node = MappingNode | SequenceNode | ScalarNode
