"""FastMCP server exposing the vnscript validator as MCP tools.

Run via::

    vnscript-mcp                        # reads .env (default: stdio)
    MCP_TRANSPORT=http vnscript-mcp     # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  vnscript-mcp     # legacy SSE on port 9000

Every tool call validates the script it is given; nothing is stored between
calls.  Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import json
import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from vnscript import __version__
from vnscript.keyword_reference import KEYWORD_REFERENCE, format_arity
from vnscript.models.diagnostics import ValidationReport
from vnscript.parser.rules import BINARY_OPERATORS, KEYWORD_RULES
from vnscript.service.checker import ScriptChecker, ScriptSafetyError
from vnscript.settings import Settings

# ---------------------------------------------------------------------------
# Server + shared state
# ---------------------------------------------------------------------------

logger = logging.getLogger("vnscript.mcp")

mcp = FastMCP("vnscript Validator")
_checker = ScriptChecker.from_settings(Settings())


def _run_checker(script: str) -> ValidationReport:
    try:
        return _checker.check(script)
    except ScriptSafetyError as exc:
        logger.warning("script rejected: %s", exc)
        raise ToolError(str(exc)) from exc


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


@mcp.resource("vnscript://reference")
def keyword_reference() -> str:
    """Keyword reference: forms, arity and semantic rules."""
    return KEYWORD_REFERENCE


@mcp.tool
def get_keyword_reference() -> str:
    """Return the vnscript keyword reference.

    Call this before writing or fixing a script to see which keywords exist
    and how many arguments each one takes.
    """
    return KEYWORD_REFERENCE


# ---------------------------------------------------------------------------
# Validation tools
# ---------------------------------------------------------------------------


@mcp.tool
def validate_script(script: str) -> str:
    """Validate a vnscript script and list its errors and warnings.

    Positions are reported as 1-based ``line:column``.

    Args:
        script: Complete script text.
    """
    logger.info("validate_script called (script length=%d)", len(script))
    report = _run_checker(script)
    if not report.diagnostics:
        return "Script is valid."

    header = "Script is valid." if report.valid else "Script has validation errors:"
    lines = [header]
    for d in report.diagnostics:
        start = d.range.start
        lines.append(f"  [{d.severity.label}] {start.line + 1}:{start.character + 1} {d.message}")
    lines.append(f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)")
    return "\n".join(lines)


@mcp.tool
def validate_script_json(script: str) -> str:
    """Validate a script and return diagnostics as a JSON array.

    Each entry has ``severity`` (1=error, 2=warning), a zero-based ``range``,
    ``message`` and ``source``, matching the Language Server Protocol.

    Args:
        script: Complete script text.
    """
    logger.info("validate_script_json called (script length=%d)", len(script))
    report = _run_checker(script)
    return json.dumps([d.model_dump(mode="json") for d in report.diagnostics], indent=2)


@mcp.tool
def list_keywords() -> str:
    """List the keywords the validator recognizes, with their argument counts."""
    lines = ["Keywords:"]
    for name, spec in KEYWORD_RULES.items():
        lines.append(f"  {name} ({format_arity(spec)} args)")
    lines.append(f"Operators: {' '.join(sorted(BINARY_OPERATORS))}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


@mcp.prompt
def write_script() -> str:
    """Guide for writing a vnscript script that validates cleanly."""
    return """\
Write a vnscript script as a sequence of parenthesized forms.

1. Declare every scene with `(label name)` before jumping to it.
2. Add exactly one `(start name)` pointing at the first scene.
3. Quote every dialogue line: `(dialogue "Hello." speaker Ann)`.
4. Move between scenes with `(jump name)` or finish with `(jump end)`.
5. Use `(set variable value)` inside `after` for state changes:
   `(after (set met_ann 1))`.

Example:

```
(start intro)
(label intro)
(bg park)
(char Ann happy left)
(dialogue "Nice weather today." speaker Ann)
(choice agree disagree)
(jump ending)
(label ending)
(say Goodbye)
(jump end)
```

Run `validate_script(script)` and fix every error before finishing.
"""


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "vnscript MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    global _checker  # noqa: PLW0603
    _checker = ScriptChecker.from_settings(settings)

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
