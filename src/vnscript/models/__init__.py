"""Pydantic and dataclass domain models for vnscript."""

from vnscript.models.diagnostics import (
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    ValidationReport,
)
from vnscript.models.forms import KeywordSpec, ParsedForm, RuleViolation, Validator

__all__ = [
    "Diagnostic",
    "DiagnosticSeverity",
    "KeywordSpec",
    "ParsedForm",
    "Position",
    "Range",
    "RuleViolation",
    "ValidationReport",
    "Validator",
]
