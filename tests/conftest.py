"""Shared test fixtures for vnscript."""

from __future__ import annotations

import pytest

from vnscript.document import TextDocument
from vnscript.models.diagnostics import Diagnostic
from vnscript.parser.sink import DiagnosticSink
from vnscript.service.checker import ScriptChecker

VALID_SCRIPT = """\
(start intro)
(label intro)
(bg park)
(char Ann happy left)
(dialogue "Nice weather today." speaker Ann)
(choice agree disagree)
(after (set met_ann 1))
(jump ending)
(label ending)
(say Goodbye)
(jump end)
"""

# Minimal prefix that satisfies the start rule, for tests about other forms.
START = "(start a)(label a)"


@pytest.fixture
def checker() -> ScriptChecker:
    return ScriptChecker()


def run(text: str) -> list[Diagnostic]:
    """Validate *text* with default limits and return its diagnostics."""
    return ScriptChecker().check(text).diagnostics


def messages(diagnostics: list[Diagnostic]) -> list[str]:
    return [d.message for d in diagnostics]


def with_message(diagnostics: list[Diagnostic], message: str) -> list[Diagnostic]:
    return [d for d in diagnostics if d.message == message]


def make_sink(text: str) -> DiagnosticSink:
    return DiagnosticSink(TextDocument(text))
