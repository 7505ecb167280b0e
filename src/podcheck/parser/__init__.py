"""YAML parsing with line fidelity for podcheck."""

from podcheck.parser.loader import DocumentParseError, TrackedLoader, YAMLSafetyError

__all__ = [
    "DocumentParseError",
    "TrackedLoader",
    "YAMLSafetyError",
]
