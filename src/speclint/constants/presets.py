"""Built-in preset catalog referenced from `extends`."""

from __future__ import annotations

from typing import Any

RECOMMENDED_PRESET: dict[str, Any] = {
    "rules": {
        "info-license": "warn",
        "info-contact": "off",
    },
    "oas3Rules": {
        "no-empty-enum-servers": "error",
    },
}

ALL_PRESET: dict[str, Any] = {
    "rules": {
        "info-license": "error",
        "info-contact": "error",
    },
    "oas3Rules": {
        "no-empty-enum-servers": "error",
    },
}

MINIMAL_PRESET: dict[str, Any] = {
    "rules": {
        "info-license": "off",
        "info-contact": "off",
    },
    "oas3Rules": {
        "no-empty-enum-servers": "warn",
    },
}

BUILTIN_PRESETS: dict[str, dict[str, Any]] = {
    "recommended": RECOMMENDED_PRESET,
    "all": ALL_PRESET,
    "minimal": MINIMAL_PRESET,
}
