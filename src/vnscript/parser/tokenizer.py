"""Form tokenizer and label pre-scan."""

from __future__ import annotations

import re

from vnscript.models.forms import ParsedForm

# A double-quoted literal (kept with its quotes) or a run of non-whitespace.
_TOKEN_RE = re.compile(r'"[^"]*"|\S+')
_LABEL_RE = re.compile(r"\(label\s+([^\s)]+)")


def tokenize_form(content: str) -> ParsedForm | None:
    """Split the inner text of a form into keyword + arguments.

    Returns ``None`` for blank content; callers skip such forms.
    """
    tokens = _TOKEN_RE.findall(content)
    if not tokens:
        return None
    return ParsedForm(keyword=tokens[0], args=tuple(tokens[1:]))


def extract_labels(text: str) -> list[str]:
    """Return every declared label name in source order, duplicates included."""
    return [m.group(1) for m in _LABEL_RE.finditer(text)]
