"""Script checker: one call per script, fresh state per call."""

from __future__ import annotations

import logging

from vnscript.document import TextDocument
from vnscript.models.diagnostics import Diagnostic, ValidationReport
from vnscript.parser.sink import DiagnosticSink
from vnscript.parser.validator import ScriptValidator
from vnscript.settings import Settings

logger = logging.getLogger("vnscript.service")


class ScriptSafetyError(Exception):
    """Raised when a script is rejected before validation (e.g. oversized input).

    Distinct from diagnostics, which describe problems inside the script.
    """


class ScriptChecker:
    """Validates whole scripts and packages the result as a report.

    Holds no per-script state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        max_script_size: int | None = None,
        source: str | None = None,
    ) -> None:
        # Unset limits fall back to the Settings field defaults
        defaults = Settings.model_fields
        if max_script_size is None:
            max_script_size = defaults["max_script_size"].default
        if source is None:
            source = defaults["diagnostic_source"].default
        self.max_script_size = max_script_size
        self.source = source
        self._validator = ScriptValidator()

    @classmethod
    def from_settings(cls, settings: Settings) -> ScriptChecker:
        return cls(
            max_script_size=settings.max_script_size,
            source=settings.diagnostic_source,
        )

    def _check_safety(self, text: str) -> None:
        if len(text) > self.max_script_size:
            raise ScriptSafetyError(
                f"Script exceeds maximum size "
                f"({len(text):,} chars > {self.max_script_size:,} limit)"
            )

    def check(self, text: str, uri: str = "<string>") -> ValidationReport:
        """Validate *text* and return all diagnostics in discovery order."""
        self._check_safety(text)
        diagnostics: list[Diagnostic] = []
        sink = DiagnosticSink(TextDocument(text, uri), diagnostics, source=self.source)
        forms = self._validator.validate(text, sink)
        logger.debug(
            "checked %s: %d forms, %d diagnostics", uri, forms, len(diagnostics)
        )
        return ValidationReport(diagnostics=diagnostics)
