"""Keyword rule table: arity bounds and semantic checks per keyword."""

from __future__ import annotations

import re
from collections.abc import Sequence
from types import MappingProxyType

from vnscript.models.diagnostics import DiagnosticSeverity
from vnscript.models.forms import KeywordSpec, ParsedForm, RuleViolation

# Operators may appear in keyword position; they get no arity or semantic check.
BINARY_OPERATORS: frozenset[str] = frozenset({"=", "+", "-", "*", "/", "%"})

AFTER_ACTIONS: tuple[str, ...] = ("load", "jump", "end", "(set")

DIALOGUE_QUOTES_MESSAGE = "Dialogue must be enclosed in double quotes"

_LABEL_NAME_RE = re.compile(r"[A-Za-z][\w-]*", re.ASCII)
_VARIABLE_NAME_RE = re.compile(r"[A-Za-z_][\w-]*", re.ASCII)
_QUOTED_RE = re.compile(r'".*"', re.DOTALL)


def _error(message: str) -> RuleViolation:
    return RuleViolation(DiagnosticSeverity.ERROR, message)


def _warning(message: str) -> RuleViolation:
    return RuleViolation(DiagnosticSeverity.WARNING, message)


def is_quoted(token: str) -> bool:
    return _QUOTED_RE.fullmatch(token) is not None


def _unquote(token: str) -> str:
    return token[1:-1] if is_quoted(token) else token


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def validate_label(form: ParsedForm, labels: Sequence[str]) -> list[RuleViolation]:
    name = form.arg(0)
    violations: list[RuleViolation] = []
    if labels.count(name) > 1:
        violations.append(_error(f"Duplicate label '{name}'"))
    if not _LABEL_NAME_RE.fullmatch(name):
        violations.append(_warning(f"Invalid label name '{name}'"))
    return violations


def validate_dialogue(form: ParsedForm, labels: Sequence[str]) -> list[RuleViolation]:
    text = form.arg(0)
    if not is_quoted(text):
        return [_error(DIALOGUE_QUOTES_MESSAGE)]

    violations: list[RuleViolation] = []
    if not _unquote(text).strip():
        violations.append(_warning("Empty dialogue"))
    if len(form.args) == 3:
        if form.arg(1) != "speaker":
            violations.append(
                _error('Dialogue with 3 args should use: (dialogue "dialogue" speaker Character)')
            )
        if not _unquote(form.arg(2)).strip():
            violations.append(_error("Speaker name is required"))
    return violations


def validate_after(form: ParsedForm, labels: Sequence[str]) -> list[RuleViolation]:
    action = form.arg(0)
    if action not in AFTER_ACTIONS:
        return [_error(f"Unknown after action '{action}'")]
    return []


def validate_jump(form: ParsedForm, labels: Sequence[str]) -> list[RuleViolation]:
    if not form.args:
        return []
    target = form.arg(0)
    if target != "end" and target not in labels:
        return [_error(f"Jump references undefined label '{target}'")]
    return []


def validate_start(form: ParsedForm, labels: Sequence[str]) -> list[RuleViolation]:
    if not form.args:
        return []
    target = form.arg(0)
    if target not in labels:
        return [_error(f"Start references undefined label '{target}'")]
    return []


def validate_set(form: ParsedForm, labels: Sequence[str]) -> list[RuleViolation]:
    name = form.arg(0)
    if not _VARIABLE_NAME_RE.fullmatch(name):
        return [_error(f"Invalid variable name '{name}'")]
    return []


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

KEYWORD_RULES: MappingProxyType[str, KeywordSpec] = MappingProxyType(
    {
        "label": KeywordSpec(
            1,
            validator=validate_label,
            usage="(label name)",
            description="Declares a jump target. Names start with a letter.",
        ),
        "dialogue": KeywordSpec(
            1,
            3,
            validator=validate_dialogue,
            usage='(dialogue "text" [speaker Character])',
            description="A line of dialogue, optionally attributed to a speaker.",
        ),
        "choice": KeywordSpec(
            1,
            usage="(choice option...)",
            description="Presents the player with one or more options.",
        ),
        "say": KeywordSpec(1, 1, usage="(say text)", description="Narration line."),
        "sound": KeywordSpec(1, 1, usage="(sound file)", description="Plays a sound effect."),
        "bg": KeywordSpec(1, 1, usage="(bg image)", description="Changes the background image."),
        "char": KeywordSpec(
            1,
            3,
            usage="(char name [pose] [position])",
            description="Shows a character sprite.",
        ),
        "after": KeywordSpec(
            1,
            validator=validate_after,
            usage="(after load|jump|end|(set ...) ...)",
            description="Action to run once the current scene finishes.",
        ),
        "jump": KeywordSpec(
            1,
            1,
            validator=validate_jump,
            usage="(jump label|end)",
            description="Continues at a declared label, or ends the script.",
        ),
        "start": KeywordSpec(
            1,
            1,
            validator=validate_start,
            usage="(start label)",
            description="Entry point of the script. Exactly one is required.",
        ),
        "set": KeywordSpec(
            2,
            validator=validate_set,
            usage="(set variable value...)",
            description="Assigns a value to a variable.",
        ),
        "end": KeywordSpec(0, 0, usage="(end)", description="Ends the script."),
        "exp": KeywordSpec(1, 1, usage="(exp expression)", description="Evaluates an expression."),
    }
)


def is_known_keyword(keyword: str) -> bool:
    return keyword in KEYWORD_RULES or keyword in BINARY_OPERATORS
