"""Shared type aliases for Speclint."""

from .common import Severity, ToggleSeverity
from .config import RuleKind, RuleSetting, SeveritySetting, SpecVersion, StructuredSetting

__all__ = [
    "RuleKind",
    "RuleSetting",
    "Severity",
    "SeveritySetting",
    "SpecVersion",
    "StructuredSetting",
    "ToggleSeverity",
]
