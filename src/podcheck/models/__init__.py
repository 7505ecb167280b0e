"""Document tree and diagnostic models for podcheck."""

from podcheck.models.errors import Diagnostic, ValidationResult
from podcheck.models.nodes import MappingNode, Node, ScalarKind, ScalarNode, SequenceNode

__all__ = [
    "Diagnostic",
    "MappingNode",
    "Node",
    "ScalarKind",
    "ScalarNode",
    "SequenceNode",
    "ValidationResult",
]
