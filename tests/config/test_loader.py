"""Tests for config file discovery and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from speclint.config import find_config, load_config
from speclint.exceptions import ConfigError
from speclint.types import SpecVersion


def test_find_config_prefers_yaml_over_yml(tmp_path: Path) -> None:
    (tmp_path / ".speclint.yml").write_text("{}\n", encoding="utf-8")
    (tmp_path / ".speclint.yaml").write_text("{}\n", encoding="utf-8")

    assert find_config(tmp_path) == tmp_path / ".speclint.yaml"


def test_find_config_returns_none_without_file(tmp_path: Path) -> None:
    assert find_config(tmp_path) is None


def test_load_config_reads_lint_section(tmp_path: Path) -> None:
    path = tmp_path / ".speclint.yaml"
    path.write_text(
        "\n".join(
            [
                "lint:",
                "  extends: []",
                "  rules:",
                "    info-license: warn",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.config_file == path
    assert config.lint.get_rule_settings("info-license", SpecVersion.OAS2) == {"severity": "warn"}


def test_load_config_custom_extends_replaces_extends(tmp_path: Path) -> None:
    path = tmp_path / ".speclint.yaml"
    path.write_text("lint:\n  extends: [all]\n", encoding="utf-8")

    config = load_config(path, ["minimal"])

    assert config.lint.get_rule_settings("no-empty-enum-servers", SpecVersion.OAS3) == {"severity": "warn"}


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / ".speclint.yaml"
    path.write_text("", encoding="utf-8")

    config = load_config(path)

    assert config.lint.recommended_fallback is True


def test_load_config_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / ".speclint.yaml"
    path.write_text("lint: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Error parsing config file"):
        load_config(path)


def test_load_config_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / ".speclint.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_config(path)


def test_load_config_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / ".speclint.yaml"
    path.write_bytes(b"lint:\n  extends: [\xff]\n")

    with pytest.raises(ConfigError, match="not valid UTF-8"):
        load_config(path)
