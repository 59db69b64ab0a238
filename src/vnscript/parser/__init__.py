"""Script tokenizing, structural walking and rule-based validation."""

from vnscript.parser.rules import BINARY_OPERATORS, KEYWORD_RULES
from vnscript.parser.sink import DiagnosticSink
from vnscript.parser.tokenizer import extract_labels, tokenize_form
from vnscript.parser.validator import ScriptValidator, validate_script
from vnscript.parser.walker import StructuralWalker

__all__ = [
    "BINARY_OPERATORS",
    "KEYWORD_RULES",
    "DiagnosticSink",
    "ScriptValidator",
    "StructuralWalker",
    "extract_labels",
    "tokenize_form",
    "validate_script",
]
