"""Shared exception hierarchy for Speclint."""

from __future__ import annotations

from .base import SpeclintError
from .config import (
    ConfigError,
    DuplicatePluginError,
    NestedExtendsError,
    PluginDefinitionError,
    PluginLoadError,
    PresetResolutionError,
)
from .parsing import DocumentError

__all__ = [
    "ConfigError",
    "DocumentError",
    "DuplicatePluginError",
    "NestedExtendsError",
    "PluginDefinitionError",
    "PluginLoadError",
    "PresetResolutionError",
    "SpeclintError",
]
