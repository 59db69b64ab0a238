"""Offset to line/character conversion for script text.

The validation engine only needs ``position_at``; any host object providing it
(an editor's text document, for instance) can be passed in place of
:class:`TextDocument`.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import Protocol

from vnscript.models.diagnostics import Position

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class PositionResolver(Protocol):
    """Anything that can turn a character offset into a line/character position."""

    def position_at(self, offset: int) -> Position: ...


class TextDocument:
    """Immutable script buffer with a precomputed line-start table.

    Offsets outside ``[0, len(text)]`` are clamped, so a position always
    lies inside the document.
    """

    def __init__(self, text: str, uri: str = "<string>") -> None:
        self._text = text
        self.uri = uri
        self._line_starts = [0] + [m.end() for m in _LINE_BREAK_RE.finditer(text)]

    @property
    def text(self) -> str:
        return self._text

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self._text)))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line=line, character=offset - self._line_starts[line])
