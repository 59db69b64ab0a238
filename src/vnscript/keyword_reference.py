"""Keyword reference text, built from the rule table and served via MCP."""

from __future__ import annotations

from vnscript.models.forms import KeywordSpec
from vnscript.parser.rules import AFTER_ACTIONS, BINARY_OPERATORS, KEYWORD_RULES


def format_arity(spec: KeywordSpec) -> str:
    """Render arity bounds as ``1``, ``1-3`` or ``2+``."""
    if spec.max_args is None:
        return f"{spec.min_args}+"
    if spec.max_args == spec.min_args:
        return str(spec.min_args)
    return f"{spec.min_args}-{spec.max_args}"


def build_reference() -> str:
    lines = [
        "# vnscript Keyword Reference",
        "",
        "A script is a sequence of parenthesized forms: `(keyword arg1 arg2 ...)`.",
        "Arguments are whitespace-separated tokens or double-quoted literals.",
        "Forms may nest, e.g. `(after (set score 10))`.",
        "",
        "## Keywords",
        "",
        "| Keyword | Args | Usage | Description |",
        "|---|---|---|---|",
    ]
    for name, spec in KEYWORD_RULES.items():
        lines.append(f"| {name} | {format_arity(spec)} | `{spec.usage}` | {spec.description} |")
    lines += [
        "",
        "## Operators",
        "",
        f"`{' '.join(sorted(BINARY_OPERATORS))}` may appear in keyword position,",
        "e.g. `(+ score 1)`. Their arguments are not checked.",
        "",
        "## Key Rules",
        "",
        "1. Exactly one `(start label)` per script, naming a declared label.",
        "2. Label names start with a letter, then letters, digits, `_` or `-`.",
        "   Each label may be declared only once.",
        "3. `(jump x)` needs a declared label `x`, or the literal `end`.",
        "4. Dialogue text must be double-quoted; the three-argument form is",
        '   `(dialogue "text" speaker Name)`.',
        f"5. `after` accepts: {', '.join(AFTER_ACTIONS)}.",
        "6. Variable names in `set` start with a letter or `_`.",
    ]
    return "\n".join(lines) + "\n"


KEYWORD_REFERENCE = build_reference()
