"""Tests for the structural walker."""

from __future__ import annotations

from vnscript.models.diagnostics import DiagnosticSeverity, Position
from vnscript.parser.walker import StructuralWalker
from tests.conftest import make_sink, messages, with_message


def _walk(text: str, labels: list[str] | None = None):
    sink = make_sink(text)
    walker = StructuralWalker(sink, labels or [])
    walker.walk(text, 0)
    return sink.diagnostics, walker


class TestKeywordChecks:
    def test_unknown_keyword_spans_form(self) -> None:
        diagnostics, _ = _walk("(foo a)")
        assert messages(diagnostics) == ["Unknown keyword 'foo'"]
        d = diagnostics[0]
        assert d.severity == DiagnosticSeverity.ERROR
        assert d.range.start == Position(line=0, character=0)
        assert d.range.end == Position(line=0, character=7)

    def test_operator_in_keyword_position(self) -> None:
        diagnostics, _ = _walk("(= x 1)(% a b c d)")
        assert diagnostics == []

    def test_too_few_args(self) -> None:
        diagnostics, _ = _walk("(say)")
        assert messages(diagnostics) == ["Too few args for 'say'"]
        assert diagnostics[0].severity == DiagnosticSeverity.ERROR

    def test_too_many_args(self) -> None:
        diagnostics, _ = _walk("(say a b)")
        assert messages(diagnostics) == ["Too many args for 'say'"]
        assert diagnostics[0].severity == DiagnosticSeverity.WARNING

    def test_exact_args(self) -> None:
        diagnostics, _ = _walk("(say a)")
        assert diagnostics == []

    def test_zero_max_is_a_bound(self) -> None:
        assert _walk("(end)")[0] == []
        assert messages(_walk("(end now)")[0]) == ["Too many args for 'end'"]

    def test_validator_runs_alongside_arity_error(self) -> None:
        diagnostics, _ = _walk("(set 9x)")
        assert messages(diagnostics) == [
            "Too few args for 'set'",
            "Invalid variable name '9x'",
        ]

    def test_dialogue_without_args_needs_quotes(self) -> None:
        diagnostics, _ = _walk("(dialogue)")
        assert messages(diagnostics) == [
            "Too few args for 'dialogue'",
            "Dialogue must be enclosed in double quotes",
        ]

    def test_missing_jump_target_reports_arity_only(self) -> None:
        diagnostics, _ = _walk("(jump)(start)")
        assert messages(diagnostics) == ["Too few args for 'jump'", "Too few args for 'start'"]

    def test_labels_reach_validators(self) -> None:
        assert _walk("(jump intro)", labels=["intro"])[0] == []
        assert messages(_walk("(jump intro)")[0]) == ["Jump references undefined label 'intro'"]


class TestStructure:
    def test_empty_forms_skipped(self) -> None:
        diagnostics, walker = _walk("()(   )")
        assert diagnostics == []
        assert walker.forms_seen == 0

    def test_unmatched_close_ignored(self) -> None:
        diagnostics, _ = _walk(")) (say a) )")
        assert diagnostics == []

    def test_unmatched_open_ignored(self) -> None:
        diagnostics, walker = _walk("((say a)")
        assert diagnostics == []
        assert walker.forms_seen == 1

    def test_counts_flat_forms(self) -> None:
        _, walker = _walk("(say a)(say b)")
        assert walker.forms_seen == 2

    def test_nested_form_absolute_position(self) -> None:
        text = "(after\n  (jump nowhere))"
        diagnostics, _ = _walk(text)
        jumps = with_message(diagnostics, "Jump references undefined label 'nowhere'")
        assert len(jumps) == 1
        assert jumps[0].range.start == Position(line=1, character=2)
        assert jumps[0].range.end == Position(line=1, character=16)
        assert with_message(diagnostics, "Unknown after action '(jump'")

    def test_leading_whitespace_keeps_offsets_absolute(self) -> None:
        text = "(  say (bar))"
        diagnostics, _ = _walk(text)
        bars = with_message(diagnostics, "Unknown keyword 'bar'")
        assert len(bars) == 1
        assert bars[0].range.start.character == 7
        assert bars[0].range.end.character == 12

    def test_nested_diagnostics_within_outer_span(self) -> None:
        text = "(choice a (set 9x 1) b)"
        diagnostics, _ = _walk(text)
        inner = with_message(diagnostics, "Invalid variable name '9x'")
        assert len(inner) == 1
        assert 0 < inner[0].range.start.character < inner[0].range.end.character < len(text)
        assert inner[0].range.start.character == text.index("(set")

    def test_each_form_visited_once(self) -> None:
        _, walker = _walk("(after (set x 1))")
        assert walker.forms_seen == 2

    def test_deep_nesting(self) -> None:
        depth = 500
        text = "(choice " * depth + "(foo)" + ")" * depth
        diagnostics, walker = _walk(text)
        assert messages(diagnostics) == ["Unknown keyword 'foo'"]
        assert walker.forms_seen == depth + 1

    def test_base_offset_added(self) -> None:
        text = "xxxxx(foo)"
        sink = make_sink(text)
        StructuralWalker(sink, []).walk("(foo)", 5)
        assert sink.diagnostics[0].range.start.character == 5
