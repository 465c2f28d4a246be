"""Tests for plugin registration and namespacing."""

from __future__ import annotations

import types
from pathlib import Path

import pytest

from speclint.config.plugins import build_plugin_list, prefix_rules, register_plugins
from speclint.exceptions import (
    ConfigError,
    DuplicatePluginError,
    PluginDefinitionError,
    PluginLoadError,
)
from speclint.types import RuleKind, SpecVersion


def test_register_plugins_prefixes_identifiers(make_plugin, noop_rule) -> None:
    plugins = register_plugins([make_plugin("acme", rules={"oas3": {"boom": noop_rule}, "oas2": {"bang": noop_rule}})])

    (plugin,) = plugins
    assert dict(plugin.rule_set(RuleKind.RULES, SpecVersion.OAS3).rules) == {"acme/boom": noop_rule}
    assert dict(plugin.rule_set(RuleKind.RULES, SpecVersion.OAS2).rules) == {"acme/bang": noop_rule}


def test_register_plugins_does_not_mutate_descriptor(make_plugin, noop_rule) -> None:
    descriptor = make_plugin("acme", preprocessors={"oas3": {"strip": noop_rule}})

    register_plugins([descriptor])

    assert descriptor["preprocessors"] == {"oas3": {"strip": noop_rule}}


def test_register_plugins_accepts_module_objects(noop_rule) -> None:
    module = types.ModuleType("acme_plugin")
    module.id = "acme"
    module.decorators = {"oas2": {"tidy": noop_rule}}

    (plugin,) = register_plugins([module])

    assert plugin.id == "acme"
    assert "acme/tidy" in plugin.rule_set(RuleKind.DECORATORS, SpecVersion.OAS2).rules
    assert plugin.rule_set(RuleKind.DECORATORS, SpecVersion.OAS3) is None


def test_register_plugins_requires_id(make_plugin) -> None:
    descriptor = make_plugin("acme")
    del descriptor["id"]

    with pytest.raises(PluginDefinitionError, match=r"must define `id` property in plugins\[0\]"):
        register_plugins([descriptor])


def test_duplicate_plugin_ids_name_both_sources(make_plugin) -> None:
    with pytest.raises(DuplicatePluginError) as excinfo:
        register_plugins([make_plugin("acme"), make_plugin("other"), make_plugin("acme")])

    message = str(excinfo.value)
    assert '"acme"' in message
    assert "plugins[2]" in message
    assert "plugins[0]" in message
    assert excinfo.value.plugin_id == "acme"
    assert isinstance(excinfo.value, ConfigError)


@pytest.mark.parametrize("section", ["rules", "preprocessors", "decorators"])
def test_section_without_any_version_is_rejected(make_plugin, section: str) -> None:
    descriptor = make_plugin("acme", **{section: {"oas3_0": {}}})

    with pytest.raises(PluginDefinitionError, match=f"`{section}` must have `oas3` or `oas2`"):
        register_plugins([descriptor])


def test_empty_version_set_is_still_declared(make_plugin) -> None:
    (plugin,) = register_plugins([make_plugin("acme", rules={"oas2": {}})])

    assert dict(plugin.rule_set(RuleKind.RULES, SpecVersion.OAS2).rules) == {}


def test_string_reference_without_loader_fails(tmp_path: Path) -> None:
    with pytest.raises(PluginLoadError, match="no plugin loader configured"):
        register_plugins(["./plugin.py"], config_file=tmp_path / ".speclint.yaml")


def test_string_reference_uses_loader_with_config_dir(tmp_path: Path, make_plugin) -> None:
    calls: list[tuple[str, Path]] = []

    def loader(reference: str, config_dir: Path) -> dict:
        calls.append((reference, config_dir))
        return make_plugin("loaded")

    (plugin,) = register_plugins(["./plugin.py"], config_file=tmp_path / ".speclint.yaml", loader=loader)

    assert calls == [("./plugin.py", tmp_path)]
    assert plugin.id == "loaded"
    assert plugin.source == "./plugin.py"


def test_type_extension_must_be_callable(make_plugin) -> None:
    with pytest.raises(PluginDefinitionError, match="typeExtension.oas3"):
        register_plugins([make_plugin("acme", typeExtension={"oas3": "nope"})])


def test_plugin_config_must_be_a_mapping(make_plugin) -> None:
    with pytest.raises(PluginDefinitionError, match=r"Plugin config `strict` must be a mapping in plugins\[0\]"):
        register_plugins([make_plugin("acme", configs={"strict": ["x"]})])


def test_build_plugin_list_appends_unprefixed_builtin_last(make_plugin) -> None:
    plugins = build_plugin_list([make_plugin("acme")])

    assert [plugin.id for plugin in plugins] == ["acme", ""]
    builtin_rules = plugins[-1].rule_set(RuleKind.RULES, SpecVersion.OAS3).rules
    assert "no-empty-enum-servers" in builtin_rules


def test_prefix_rules_returns_new_mapping(noop_rule) -> None:
    rules = {"a": noop_rule}

    assert prefix_rules(rules, "p") == {"p/a": noop_rule}
    assert rules == {"a": noop_rule}
