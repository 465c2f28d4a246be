"""Lint runner for Speclint."""

from .context import RuleContext
from .runner import detect_spec_version, lint_document, lint_file, load_document

__all__ = ["RuleContext", "detect_spec_version", "lint_document", "lint_file", "load_document"]
