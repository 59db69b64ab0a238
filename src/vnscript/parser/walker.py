"""Single-pass walker over nested parenthesized forms."""

from __future__ import annotations

from collections.abc import Sequence

from vnscript.models.forms import ParsedForm
from vnscript.parser.rules import KEYWORD_RULES, is_known_keyword
from vnscript.parser.sink import DiagnosticSink
from vnscript.parser.tokenizer import tokenize_form


class StructuralWalker:
    """Finds every matched ``( ... )`` span in a text window and validates it.

    Pending openers live on an explicit stack of indices and a ``)`` always
    closes the most recent one, so forms are visited innermost-first at any
    nesting depth without recursion.  Inside a matched span the pairing is
    exactly the one a fresh scan of that span would produce, which makes a
    separate pass per nesting level unnecessary.

    Offsets handed to the sink are ``offset`` plus the index in *text*, i.e.
    absolute positions when the caller passes the window's own offset.
    """

    def __init__(self, sink: DiagnosticSink, labels: Sequence[str]) -> None:
        self._sink = sink
        self._labels = labels
        self.forms_seen = 0

    def walk(self, text: str, offset: int = 0) -> None:
        stack: list[int] = []
        for i, ch in enumerate(text):
            if ch == "(":
                stack.append(i)
            elif ch == ")" and stack:
                open_idx = stack.pop()
                form = tokenize_form(text[open_idx + 1 : i])
                if form is None:
                    continue
                self.forms_seen += 1
                self._check(form, offset + open_idx, offset + i + 1)
        # Unmatched ")" were ignored above; leftover "(" are reported by
        # the global balance check only.

    def _check(self, form: ParsedForm, start: int, end: int) -> None:
        if not is_known_keyword(form.keyword):
            self._sink.error(start, end, f"Unknown keyword '{form.keyword}'")

        spec = KEYWORD_RULES.get(form.keyword)
        if spec is None:
            return

        count = len(form.args)
        if count < spec.min_args:
            self._sink.error(start, end, f"Too few args for '{form.keyword}'")
        if spec.max_args is not None and count > spec.max_args:
            self._sink.warning(start, end, f"Too many args for '{form.keyword}'")
        if spec.validator is not None:
            for violation in spec.validator(form, self._labels):
                self._sink.add(violation.severity, start, end, violation.message)
