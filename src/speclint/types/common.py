"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["error", "warn", "off"]
# Preprocessors and decorators also accept `on`.
ToggleSeverity: TypeAlias = Literal["error", "warn", "off", "on"]
