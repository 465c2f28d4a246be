"""CLI branding strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "Speclint resolves layered lint configuration (plugins, presets, inline rules and\n"
    "an ignore file) for OpenAPI 2 and 3 definitions and lints documents with it."
)
