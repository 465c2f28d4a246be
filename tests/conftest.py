"""Shared pytest fixtures for Speclint tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


def _noop_rule(document: dict[str, Any], ctx: Any) -> None:
    return None


@pytest.fixture
def noop_rule() -> Callable[..., None]:
    """Return a rule callable that never reports."""
    return _noop_rule


@pytest.fixture
def make_plugin() -> Callable[..., dict[str, Any]]:
    """Return a factory for inline plugin descriptors."""

    def _make(plugin_id: str = "acme", **sections: Any) -> dict[str, Any]:
        descriptor: dict[str, Any] = {"id": plugin_id}
        if not sections:
            sections = {"rules": {"oas3": {"boom": _noop_rule}}}
        descriptor.update(sections)
        return descriptor

    return _make


@pytest.fixture
def oas3_document() -> dict[str, Any]:
    """Return a minimal OpenAPI 3 document."""
    return {
        "openapi": "3.1.0",
        "info": {"title": "API", "version": "1.0.0"},
        "components": {},
    }
