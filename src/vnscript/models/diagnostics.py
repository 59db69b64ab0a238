"""Editor-facing diagnostic models, shaped like LSP ``Diagnostic`` records."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel


class DiagnosticSeverity(IntEnum):
    """Severity levels, numbered as in the Language Server Protocol."""

    ERROR = 1
    WARNING = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class Position(BaseModel):
    """Zero-based line/character position in a script."""

    line: int
    character: int


class Range(BaseModel):
    start: Position
    end: Position


class Diagnostic(BaseModel):
    """A single issue found in a script, located by line/character range."""

    severity: DiagnosticSeverity
    range: Range
    message: str
    source: str = "vnscript"


class ValidationReport(BaseModel):
    """Result of validating one script."""

    diagnostics: list[Diagnostic] = []

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def valid(self) -> bool:
        """True when the script has no errors (warnings are allowed)."""
        return not self.errors
