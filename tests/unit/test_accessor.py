"""Tests for mapping lookup and the presence-only field rule."""

from __future__ import annotations

from podcheck.models.nodes import MappingNode, ScalarKind, ScalarNode, SequenceNode
from podcheck.validation.accessor import evaluate_field, lookup, lookup_entry
from podcheck.validation.context import ValidationContext


def _s(value: str, line: int, kind: ScalarKind = ScalarKind.STRING) -> ScalarNode:
    return ScalarNode(value=value, kind=kind, line=line)


MAPPING = MappingNode(
    entries=(
        (_s("name", 2), _s("web", 2)),
        (_s("Name", 3), _s("other", 3)),
        (_s("name", 4), _s("duplicate", 4)),
        (_s("empty", 5), _s("", 5, ScalarKind.NULL)),
        (_s("blank", 6), _s("", 6)),
        (_s("items", 7), SequenceNode(items=(), line=7)),
    ),
    line=2,
)


class TestLookup:
    def test_first_match_wins(self) -> None:
        assert lookup(MAPPING, "name") == _s("web", 2)

    def test_case_sensitive(self) -> None:
        assert lookup(MAPPING, "Name") == _s("other", 3)
        assert lookup(MAPPING, "NAME") is None

    def test_missing_key(self) -> None:
        assert lookup(MAPPING, "image") is None

    def test_non_mapping_yields_none(self) -> None:
        assert lookup(SequenceNode(line=1), "name") is None
        assert lookup(_s("x", 1), "name") is None
        assert lookup(None, "name") is None

    def test_lookup_entry_returns_key_node(self) -> None:
        entry = lookup_entry(MAPPING, "items")
        assert entry is not None
        key, value = entry
        assert key.line == 7
        assert isinstance(value, SequenceNode)

    def test_non_scalar_keys_never_match(self) -> None:
        mapping = MappingNode(entries=((SequenceNode(line=1), _s("v", 1)),), line=1)
        assert lookup(mapping, "") is None


class TestEvaluateField:
    def test_present_value_returned_unchanged(self) -> None:
        ctx = ValidationContext(filename="pod.yaml")
        assert evaluate_field(ctx, MAPPING, "items") == SequenceNode(items=(), line=7)
        assert len(ctx.sink) == 0

    def test_missing_required_reported_at_parent(self) -> None:
        ctx = ValidationContext(filename="pod.yaml")
        assert evaluate_field(ctx, MAPPING, "image") is None
        assert [(d.line, d.message) for d in ctx.sink] == [(2, "image is required")]

    def test_missing_optional_is_silent(self) -> None:
        ctx = ValidationContext(filename="pod.yaml")
        assert evaluate_field(ctx, MAPPING, "ports", required=False) is None
        assert len(ctx.sink) == 0

    def test_empty_value_counts_as_missing_when_non_empty(self) -> None:
        ctx = ValidationContext(filename="pod.yaml")
        assert evaluate_field(ctx, MAPPING, "empty", non_empty=True) is None
        assert evaluate_field(ctx, MAPPING, "blank", non_empty=True) is None
        assert [(d.line, d.message) for d in ctx.sink] == [
            (5, "empty is required"),
            (6, "blank is required"),
        ]

    def test_empty_value_kept_without_non_empty(self) -> None:
        ctx = ValidationContext(filename="pod.yaml")
        assert evaluate_field(ctx, MAPPING, "blank") == _s("", 6)
        assert len(ctx.sink) == 0

    def test_label_overrides_message(self) -> None:
        ctx = ValidationContext(filename="pod.yaml")
        evaluate_field(ctx, MAPPING, "image", label="container.image")
        assert ctx.sink.diagnostics[0].message == "container.image is required"

    def test_wrong_shape_is_not_a_presence_error(self) -> None:
        ctx = ValidationContext(filename="pod.yaml")
        assert evaluate_field(ctx, MAPPING, "items", non_empty=True) is not None
        assert len(ctx.sink) == 0
