"""Configuration-related exceptions."""

from __future__ import annotations

from speclint.exceptions.base import SpeclintError


class ConfigError(SpeclintError, ValueError):
    """Raised when lint configuration is invalid."""


class PluginDefinitionError(ConfigError):
    """Raised when a plugin has no id or declares a section with no spec version."""


class DuplicatePluginError(ConfigError):
    """Raised when two plugins share the same id."""

    def __init__(self, plugin_id: str, source: str, first_source: str) -> None:
        self.plugin_id = plugin_id
        self.source = source
        self.first_source = first_source
        super().__init__(
            f'Plugin "id" must be unique. Plugin {source} uses id "{plugin_id}" already seen in {first_source}'
        )


class PluginLoadError(ConfigError):
    """Raised when a plugin reference cannot be turned into a plugin descriptor."""


class PresetResolutionError(ConfigError):
    """Raised when an `extends` entry names no known preset."""

    def __init__(self, preset: str, message: str, plugin_id: str | None = None) -> None:
        self.preset = preset
        self.plugin_id = plugin_id
        super().__init__(message)


class NestedExtendsError(ConfigError):
    """Raised when a preset fragment itself declares `extends`."""
