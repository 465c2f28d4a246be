"""Configuration resolution for Speclint lint runs.

This package facade re-exports the public names so callers can write
``from speclint.config import LintConfig``.
"""

from __future__ import annotations

from speclint.config.ignore import IgnoreStore
from speclint.config.loader import find_config, load_config
from speclint.config.merge import RuleTable, merge_fragments, parse_setting
from speclint.config.model import Config, LintConfig, ResolveHeader
from speclint.config.plugins import Plugin, RuleSet, build_plugin_list, register_plugins
from speclint.config.presets import resolve_presets
from speclint.config.settings import SettingsResolver, UnusedIdentifiers, normalize_setting
from speclint.config.validator import validate_config_file

__all__ = [
    "Config",
    "IgnoreStore",
    "LintConfig",
    "Plugin",
    "ResolveHeader",
    "RuleSet",
    "RuleTable",
    "SettingsResolver",
    "UnusedIdentifiers",
    "build_plugin_list",
    "find_config",
    "load_config",
    "merge_fragments",
    "normalize_setting",
    "parse_setting",
    "register_plugins",
    "resolve_presets",
    "validate_config_file",
]
