"""YAML loader producing line-annotated document trees for validation."""

from __future__ import annotations

from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml import composer as yaml_composer
from ruamel.yaml import nodes as yaml_nodes
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from podcheck.models.nodes import MappingNode, Node, ScalarKind, ScalarNode, SequenceNode

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 64

# Core-schema tag suffix -> inferred kind.  Anything else is a string.
_TAG_KINDS: dict[str, ScalarKind] = {
    "int": ScalarKind.INTEGER,
    "float": ScalarKind.FLOAT,
    "bool": ScalarKind.BOOLEAN,
    "null": ScalarKind.NULL,
}

# Raised by ruamel.yaml once nesting passes ``max_depth`` while composing.
_DEPTH_ERRORS = getattr(yaml_composer, "MaxDepthExceededError", ())


class DocumentParseError(Exception):
    """Raised when raw text cannot be turned into a document tree."""

    def __init__(self, message: str, line: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.line = line


class YAMLSafetyError(DocumentParseError):
    """Raised when YAML input violates safety constraints.

    Distinct from syntax errors: these indicate oversized or pathological
    input (alias bombs, runaway nesting) rather than malformed text.
    """


class TrackedLoader:
    """Composes YAML into :mod:`podcheck.models.nodes` trees.

    Uses ruamel.yaml's composer, which resolves implicit tags from the
    literal syntax and keeps a start mark on every node.  Nothing is
    constructed into Python objects, so ``"80"`` stays a string and ``80``
    stays an integer.
    """

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.max_depth = _MAX_DEPTH

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_yaml_safety(content: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> list[Node]:
        """Load a YAML file and return one tree per document."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content)

    def load_string(self, content: str) -> list[Node]:
        """Load YAML from a string.  An empty stream yields an empty list."""
        self._check_yaml_safety(content)
        try:
            composed = list(self._yaml.compose_all(content))
        except RecursionError as exc:
            raise YAMLSafetyError(_depth_message()) from exc
        except MarkedYAMLError as exc:
            if isinstance(exc, _DEPTH_ERRORS):
                raise YAMLSafetyError(_depth_message(), _problem_line(exc)) from exc
            raise DocumentParseError(_describe(exc), _problem_line(exc)) from exc
        except YAMLError as exc:
            raise DocumentParseError(str(exc).strip()) from exc

        budget = _NodeBudget(_MAX_NODE_COUNT)
        return [self._convert(node, budget, 0) for node in composed if node is not None]

    # -- conversion ----------------------------------------------------------

    def _convert(self, node: yaml_nodes.Node, budget: _NodeBudget, depth: int) -> Node:
        """Recursively convert a ruamel node, enforcing depth and size limits."""
        if depth > _MAX_DEPTH:
            raise YAMLSafetyError(_depth_message(), _line_of(node))
        budget.take(node)
        line = _line_of(node)

        if isinstance(node, yaml_nodes.MappingNode):
            entries = tuple(
                (
                    self._convert(key, budget, depth + 1),
                    self._convert(value, budget, depth + 1),
                )
                for key, value in node.value
            )
            return MappingNode(entries=entries, line=line)
        if isinstance(node, yaml_nodes.SequenceNode):
            items = tuple(self._convert(item, budget, depth + 1) for item in node.value)
            return SequenceNode(items=items, line=line)
        return ScalarNode(value=str(node.value), kind=_scalar_kind(node), line=line)


class _NodeBudget:
    """Counts converted nodes.  Aliases are counted every time they expand."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.count = 0

    def take(self, node: yaml_nodes.Node) -> None:
        self.count += 1
        if self.count > self.limit:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum node count ({self.limit:,})",
                _line_of(node),
            )


def _scalar_kind(node: yaml_nodes.Node) -> ScalarKind:
    # Quoted scalars resolve to str unless they carry an explicit tag.
    tag = str(node.tag) if node.tag is not None else ""
    return _TAG_KINDS.get(tag.rsplit(":", 1)[-1].lstrip("!"), ScalarKind.STRING)


def _depth_message() -> str:
    return f"YAML document exceeds maximum nesting depth ({_MAX_DEPTH})"


def _line_of(node: yaml_nodes.Node) -> int:
    mark = node.start_mark
    return mark.line + 1 if mark is not None else 1


def _problem_line(exc: MarkedYAMLError) -> int:
    mark = exc.problem_mark or exc.context_mark
    return mark.line + 1 if mark is not None else 1


def _describe(exc: MarkedYAMLError) -> str:
    parts = [p for p in (exc.context, exc.problem) if p]
    return ", ".join(parts) if parts else str(exc).strip()
