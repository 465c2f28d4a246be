"""Typed structures for spec versions, rule families, and rule settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias

from .common import Severity, ToggleSeverity


class SpecVersion(str, Enum):
    """Major OpenAPI dialect a rule table row applies to."""

    OAS2 = "oas2"
    OAS3 = "oas3"


class RuleKind(str, Enum):
    """Family of configurable identifiers."""

    RULES = "rules"
    PREPROCESSORS = "preprocessors"
    DECORATORS = "decorators"

    def version_key(self, version: SpecVersion) -> str:
        """Return the raw-config key for this family scoped to ``version``."""
        return f"{version.value}{self.value.capitalize()}"


@dataclass(frozen=True)
class SeveritySetting:
    """Bare severity tag such as ``error`` or ``off``."""

    tag: ToggleSeverity


@dataclass(frozen=True)
class StructuredSetting:
    """Mapping setting with an optional severity and free-form options."""

    severity: Severity | None = None
    options: dict[str, Any] = field(default_factory=dict)


RuleSetting: TypeAlias = SeveritySetting | StructuredSetting
