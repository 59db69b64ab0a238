"""Ordered, duplicate-suppressing diagnostic collector."""

from __future__ import annotations

from vnscript.document import PositionResolver
from vnscript.models.diagnostics import Diagnostic, DiagnosticSeverity, Range


class DiagnosticSink:
    """Appends diagnostics to a caller-owned list, converting offsets on the way.

    Two diagnostics are considered the same when they start at the same
    line/character and carry the same message; severity and end position are
    not part of the key, so the first one added wins.
    """

    def __init__(
        self,
        document: PositionResolver,
        diagnostics: list[Diagnostic] | None = None,
        source: str = "vnscript",
    ) -> None:
        self._document = document
        self.diagnostics: list[Diagnostic] = diagnostics if diagnostics is not None else []
        self.source = source
        self._seen: set[tuple[int, int, str]] = {
            (d.range.start.line, d.range.start.character, d.message) for d in self.diagnostics
        }

    def add(self, severity: DiagnosticSeverity, start: int, end: int, message: str) -> bool:
        """Record a diagnostic for ``[start, end)``; return False if it was a duplicate."""
        start_pos = self._document.position_at(start)
        key = (start_pos.line, start_pos.character, message)
        if key in self._seen:
            return False
        self._seen.add(key)
        self.diagnostics.append(
            Diagnostic(
                severity=severity,
                range=Range(start=start_pos, end=self._document.position_at(end)),
                message=message,
                source=self.source,
            )
        )
        return True

    def error(self, start: int, end: int, message: str) -> bool:
        return self.add(DiagnosticSeverity.ERROR, start, end, message)

    def warning(self, start: int, end: int, message: str) -> bool:
        return self.add(DiagnosticSeverity.WARNING, start, end, message)

    def __len__(self) -> int:
        return len(self.diagnostics)
