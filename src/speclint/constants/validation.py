"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid severity value
CFG007: str = "CFG007"  # unresolvable preset name
CFG008: str = "CFG008"  # invalid nested mapping

ALLOWED_ROOT_KEYS: frozenset[str] = frozenset({"apiDefinitions", "lint", "referenceDocs", "resolve"})

ALLOWED_LINT_KEYS: frozenset[str] = frozenset(
    {
        "plugins",
        "extends",
        "doNotResolveExamples",
        "rules",
        "oas2Rules",
        "oas3Rules",
        "preprocessors",
        "oas2Preprocessors",
        "oas3Preprocessors",
        "decorators",
        "oas2Decorators",
        "oas3Decorators",
    }
)

ALLOWED_RESOLVE_KEYS: frozenset[str] = frozenset({"http"})
ALLOWED_HTTP_KEYS: frozenset[str] = frozenset({"headers"})
