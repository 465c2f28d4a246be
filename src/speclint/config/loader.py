"""Config file discovery and loading."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from speclint.config.model import Config
from speclint.config.plugins import PluginLoader
from speclint.constants.config import CONFIG_FILENAMES, EXTENDS_KEY, LINT_SECTION_KEY
from speclint.exceptions import ConfigError

logger = logging.getLogger(__name__)


def find_config(directory: Path | None = None) -> Path | None:
    """Return the first conventional config file present in ``directory``."""
    directory = directory or Path.cwd()
    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_config(
    config_path: Path | None = None,
    custom_extends: Sequence[str] | None = None,
    *,
    plugin_loader: PluginLoader | None = None,
) -> Config:
    """Load a config file (or discover one) and build the resolved ``Config``.

    ``custom_extends`` replaces the lint section's ``extends`` list.
    """
    explicit = config_path is not None
    path = config_path if explicit else find_config()
    raw: dict = {}

    if path is not None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Error parsing config file at `{path}`: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Config file at `{path}` is not valid UTF-8: {exc}") from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file at {path} must be a YAML mapping")
        raw = loaded
        logger.debug("Loaded config from %s", path)
    else:
        logger.debug("No config file found, using defaults")

    if custom_extends is not None:
        lint_section = raw.get(LINT_SECTION_KEY) or {}
        if not isinstance(lint_section, dict):
            raise ConfigError("`lint` must be a mapping")
        raw[LINT_SECTION_KEY] = {**lint_section, EXTENDS_KEY: list(custom_extends)}

    return Config(raw, path, plugin_loader=plugin_loader)
