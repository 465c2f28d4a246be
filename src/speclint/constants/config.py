"""Configuration defaults, filenames, and raw-config key names."""

from __future__ import annotations

CONFIG_FILENAMES: tuple[str, ...] = (".speclint.yaml", ".speclint.yml")

IGNORE_FILENAME: str = ".speclint.lint-ignore.yaml"
IGNORE_BANNER: str = (
    "# This file instructs speclint to ignore the rules contained for specific parts of your API.\n"
    "# See `speclint lint --help` for more information.\n"
)
IGNORE_TEMP_PREFIX: str = ".tmp-ignore-"
IGNORE_TEMP_SUFFIX: str = ".yaml"

BUILTIN_PLUGIN_ID: str = ""
PLUGIN_ID_SEPARATOR: str = "/"

DEFAULT_PRESET: str = "recommended"

RULE_SEVERITIES: frozenset[str] = frozenset({"error", "warn", "off"})
# Preprocessors and decorators accept `on` as an alias of `error`.
TOGGLE_SEVERITIES: frozenset[str] = frozenset({"error", "warn", "off", "on"})

SEVERITY_OFF: str = "off"
SEVERITY_ON: str = "on"
SEVERITY_ERROR: str = "error"

EXTENDS_KEY: str = "extends"
PLUGINS_KEY: str = "plugins"
DO_NOT_RESOLVE_EXAMPLES_KEY: str = "doNotResolveExamples"
LINT_SECTION_KEY: str = "lint"
