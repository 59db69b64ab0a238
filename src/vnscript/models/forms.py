"""Parsed form and keyword rule types used by the structural walker."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from vnscript.models.diagnostics import DiagnosticSeverity


@dataclass(frozen=True)
class ParsedForm:
    """Keyword and arguments of one parenthesized form, in source order."""

    keyword: str
    args: tuple[str, ...]

    def arg(self, index: int) -> str:
        """Return the argument at *index*, or ``""`` when it is absent."""
        return self.args[index] if index < len(self.args) else ""


@dataclass(frozen=True)
class RuleViolation:
    """A problem reported by a keyword validator, located at the whole form."""

    severity: DiagnosticSeverity
    message: str


Validator = Callable[[ParsedForm, Sequence[str]], list[RuleViolation]]


@dataclass(frozen=True)
class KeywordSpec:
    """Arity bounds and optional semantic check for a keyword.

    ``max_args`` of ``None`` means the keyword takes any number of arguments.
    """

    min_args: int
    max_args: int | None = None
    validator: Validator | None = None
    usage: str = ""
    description: str = ""
