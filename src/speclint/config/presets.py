"""Preset (`extends`) resolution against the built-in catalog and plugin presets."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from speclint.config.plugins import Plugin
from speclint.constants.config import PLUGIN_ID_SEPARATOR
from speclint.constants.presets import BUILTIN_PRESETS
from speclint.exceptions import PresetResolutionError

logger = logging.getLogger(__name__)


def resolve_presets(extends: Sequence[str], plugins: Sequence[Plugin]) -> list[Mapping[str, Any]]:
    """Resolve preset names to raw fragments, preserving order.

    A name without ``/`` is looked up in the built-in catalog; ``plugin/preset``
    is looked up among the presets exposed by the plugin with that id.
    """
    return [resolve_preset(name, plugins) for name in extends]


def resolve_preset(name: str, plugins: Sequence[Plugin]) -> Mapping[str, Any]:
    """Resolve a single preset name to its raw fragment."""
    if not isinstance(name, str) or not name:
        raise PresetResolutionError(str(name), f"Invalid config {name!r}: preset names must be non-empty strings.")

    parts = name.split(PLUGIN_ID_SEPARATOR)
    if len(parts) == 1:
        preset = BUILTIN_PRESETS.get(name)
        if preset is None:
            raise PresetResolutionError(name, f"Invalid config {name}: there is no such built-in config.")
        logger.debug("Resolved built-in preset %s", name)
        return preset

    if len(parts) != 2:
        raise PresetResolutionError(
            name,
            f"Invalid config {name}: expected `<plugin>/<config>` with a single `/`.",
        )

    plugin_id, config_name = parts
    plugin = next((p for p in plugins if p.id == plugin_id), None)
    if plugin is None:
        raise PresetResolutionError(
            name,
            f"Invalid config {name}: plugin {plugin_id} is not included.",
            plugin_id=plugin_id,
        )

    preset = plugin.configs.get(config_name)
    if preset is None:
        raise PresetResolutionError(
            name,
            f"Invalid config {name}: plugin {plugin_id} doesn't export config with name {config_name}.",
            plugin_id=plugin_id,
        )
    logger.debug("Resolved preset %s from plugin %s", config_name, plugin.source)
    return preset
