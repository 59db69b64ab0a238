"""Whole-script validation: balance, structure, start and dialogue checks."""

from __future__ import annotations

import re

from vnscript.document import PositionResolver
from vnscript.models.diagnostics import Diagnostic
from vnscript.parser.rules import DIALOGUE_QUOTES_MESSAGE
from vnscript.parser.sink import DiagnosticSink
from vnscript.parser.tokenizer import extract_labels
from vnscript.parser.walker import StructuralWalker

_START_RE = re.compile(r"\(start\s+")
# Looser than the walker: also reaches dialogue forms that never close.
_UNQUOTED_DIALOGUE_RE = re.compile(r'\(dialogue\s+([^\s")][^")]*)')

_START_MARKER_LENGTH = 10


class ScriptValidator:
    """Runs every check over one script and feeds a :class:`DiagnosticSink`."""

    def validate(self, text: str, sink: DiagnosticSink) -> int:
        """Validate *text*; return the number of forms the walker visited."""
        self._check_balance(text, sink)

        labels = extract_labels(text)
        walker = StructuralWalker(sink, labels)
        walker.walk(text, 0)

        self._check_start(text, sink)
        self._check_dialogue_quotes(text, sink)
        return walker.forms_seen

    @staticmethod
    def _check_balance(text: str, sink: DiagnosticSink) -> None:
        opening = text.count("(")
        closing = text.count(")")
        if opening != closing:
            sink.error(0, 1, f"Mismatched parentheses: {opening} opening, {closing} closing")

    @staticmethod
    def _check_start(text: str, sink: DiagnosticSink) -> None:
        starts = list(_START_RE.finditer(text))
        if not starts:
            sink.error(0, 1, "Script must contain a start")
        elif len(starts) > 1:
            second = starts[1].start()
            end = min(second + _START_MARKER_LENGTH, len(text))
            sink.error(second, end, "Multiple start keywords found")

    @staticmethod
    def _check_dialogue_quotes(text: str, sink: DiagnosticSink) -> None:
        for match in _UNQUOTED_DIALOGUE_RE.finditer(text):
            sink.error(match.start(), match.end(), DIALOGUE_QUOTES_MESSAGE)


def validate_script(
    text: str,
    document: PositionResolver,
    diagnostics: list[Diagnostic],
    source: str = "vnscript",
) -> list[Diagnostic]:
    """Validate *text* and append its diagnostics to *diagnostics*.

    *document* converts character offsets of *text* into line/character
    positions. The same list is returned for convenience.
    """
    sink = DiagnosticSink(document, diagnostics, source=source)
    ScriptValidator().validate(text, sink)
    return diagnostics
