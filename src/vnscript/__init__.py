"""vnscript: static validation for parenthesized visual-novel scripts."""

__version__ = "0.3.0"
