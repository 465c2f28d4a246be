"""Plugin registration and identifier namespacing.

Plugin descriptors arrive already loaded: either mappings (inline plugins from
the config file) or attribute-bearing objects such as imported modules. String
references are handed to an injected loader; importing plugin code is the
loader's job, not the registry's.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeAlias

from speclint.constants.config import BUILTIN_PLUGIN_ID, PLUGIN_ID_SEPARATOR
from speclint.exceptions import DuplicatePluginError, PluginDefinitionError, PluginLoadError
from speclint.rules import BUILTIN_DECORATORS, BUILTIN_PREPROCESSORS, BUILTIN_RULES
from speclint.types import RuleKind, SpecVersion

logger = logging.getLogger(__name__)

Rule: TypeAlias = Callable[..., Any]
TypesExtension: TypeAlias = Callable[[dict[str, Any], SpecVersion], dict[str, Any]]
PluginLoader: TypeAlias = Callable[[str, Path], Any]

_TYPE_EXTENSION_FIELDS: tuple[str, ...] = ("typeExtension", "type_extension")


@dataclass(frozen=True)
class RuleSet:
    """Rules of one family, for one spec version, contributed by one plugin."""

    kind: RuleKind
    version: SpecVersion
    plugin_id: str
    rules: Mapping[str, Rule]


@dataclass(frozen=True)
class Plugin:
    """A validated plugin whose identifiers are already namespaced."""

    id: str
    source: str
    configs: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    rule_sets: Mapping[tuple[RuleKind, SpecVersion], RuleSet] = field(default_factory=dict)
    type_extension: Mapping[SpecVersion, TypesExtension] = field(default_factory=dict)

    def rule_set(self, kind: RuleKind, version: SpecVersion) -> RuleSet | None:
        """Return this plugin's rule set for ``kind`` and ``version``, if declared."""
        return self.rule_sets.get((kind, version))


def prefix_rules(rules: Mapping[str, Rule], prefix: str) -> dict[str, Rule]:
    """Return a copy of ``rules`` with every identifier namespaced by ``prefix``."""
    return {f"{prefix}{PLUGIN_ID_SEPARATOR}{name}": rule for name, rule in rules.items()}


def register_plugins(
    descriptors: Sequence[Any] | None,
    *,
    config_file: Path | None = None,
    loader: PluginLoader | None = None,
) -> tuple[Plugin, ...]:
    """Validate plugin descriptors and return namespaced plugin records in order."""
    if not descriptors:
        return ()

    config_dir = config_file.parent if config_file is not None else Path.cwd()
    seen_sources: dict[str, str] = {}
    plugins: list[Plugin] = []

    for index, reference in enumerate(descriptors):
        descriptor = _load_descriptor(reference, config_dir, loader)
        source = _describe_source(reference, descriptor, index)

        plugin_id = _field(descriptor, "id")
        if not isinstance(plugin_id, str) or not plugin_id:
            raise PluginDefinitionError(f"Plugin must define `id` property in {source}.")
        if plugin_id in seen_sources:
            raise DuplicatePluginError(plugin_id, source, seen_sources[plugin_id])
        seen_sources[plugin_id] = source

        plugin = Plugin(
            id=plugin_id,
            source=source,
            configs=MappingProxyType(_read_configs(descriptor, source)),
            rule_sets=MappingProxyType(_read_rule_sets(descriptor, plugin_id, source)),
            type_extension=MappingProxyType(_read_type_extension(descriptor, source)),
        )
        logger.debug(
            "Registered plugin %s from %s (%d rule sets, %d presets)",
            plugin_id,
            source,
            len(plugin.rule_sets),
            len(plugin.configs),
        )
        plugins.append(plugin)

    return tuple(plugins)


def builtin_plugin() -> Plugin:
    """Return the implicit plugin carrying the un-prefixed built-in rule sets."""
    rule_sets: dict[tuple[RuleKind, SpecVersion], RuleSet] = {}
    for kind, by_version in (
        (RuleKind.PREPROCESSORS, BUILTIN_PREPROCESSORS),
        (RuleKind.RULES, BUILTIN_RULES),
        (RuleKind.DECORATORS, BUILTIN_DECORATORS),
    ):
        for version, rules in by_version.items():
            rule_sets[(kind, version)] = RuleSet(
                kind=kind,
                version=version,
                plugin_id=BUILTIN_PLUGIN_ID,
                rules=MappingProxyType(dict(rules)),
            )
    return Plugin(id=BUILTIN_PLUGIN_ID, source="<built-in>", rule_sets=MappingProxyType(rule_sets))


def build_plugin_list(
    descriptors: Sequence[Any] | None,
    *,
    config_file: Path | None = None,
    loader: PluginLoader | None = None,
) -> tuple[Plugin, ...]:
    """Register user plugins and append the built-in plugin last."""
    return (*register_plugins(descriptors, config_file=config_file, loader=loader), builtin_plugin())


def _load_descriptor(reference: Any, config_dir: Path, loader: PluginLoader | None) -> Any:
    """Turn a plugin reference into a descriptor, delegating strings to ``loader``."""
    if not isinstance(reference, str):
        return reference
    if loader is None:
        raise PluginLoadError(
            f"Plugin reference {reference!r} cannot be loaded: no plugin loader configured."
        )
    descriptor = loader(reference, config_dir)
    if descriptor is None:
        raise PluginLoadError(f"Plugin loader returned nothing for {reference!r}.")
    return descriptor


def _describe_source(reference: Any, descriptor: Any, index: int) -> str:
    if isinstance(reference, str):
        return reference
    module_file = getattr(descriptor, "__file__", None)
    if isinstance(module_file, str):
        return module_file
    return f"plugins[{index}]"


def _field(descriptor: Any, *names: str) -> Any:
    """Read the first present field from a mapping or attribute-bearing object."""
    for name in names:
        if isinstance(descriptor, Mapping):
            value = descriptor.get(name)
        else:
            value = getattr(descriptor, name, None)
        if value is not None:
            return value
    return None


def _read_configs(descriptor: Any, source: str) -> dict[str, Mapping[str, Any]]:
    configs = _field(descriptor, "configs")
    if configs is None:
        return {}
    if not isinstance(configs, Mapping):
        raise PluginDefinitionError(f"Plugin `configs` must be a mapping in {source}.")
    for name, preset in configs.items():
        if not isinstance(preset, Mapping):
            raise PluginDefinitionError(f"Plugin config `{name}` must be a mapping in {source}.")
    return dict(configs)


def _read_rule_sets(
    descriptor: Any,
    plugin_id: str,
    source: str,
) -> dict[tuple[RuleKind, SpecVersion], RuleSet]:
    rule_sets: dict[tuple[RuleKind, SpecVersion], RuleSet] = {}
    for kind in RuleKind:
        section = _field(descriptor, kind.value)
        if section is None:
            continue
        if not isinstance(section, Mapping):
            raise PluginDefinitionError(f"Plugin `{kind.value}` must be a mapping in {source}.")

        versions = [version for version in SpecVersion if section.get(version.value) is not None]
        if not versions:
            raise PluginDefinitionError(
                f"Plugin `{kind.value}` must have `oas3` or `oas2` {kind.value} in {source}."
            )
        for version in versions:
            rules = section[version.value]
            if not isinstance(rules, Mapping):
                raise PluginDefinitionError(
                    f"Plugin `{kind.value}.{version.value}` must be a mapping in {source}."
                )
            rule_sets[(kind, version)] = RuleSet(
                kind=kind,
                version=version,
                plugin_id=plugin_id,
                rules=MappingProxyType(prefix_rules(rules, plugin_id)),
            )
    return rule_sets


def _read_type_extension(descriptor: Any, source: str) -> dict[SpecVersion, TypesExtension]:
    extension = _field(descriptor, *_TYPE_EXTENSION_FIELDS)
    if extension is None:
        return {}
    if not isinstance(extension, Mapping):
        raise PluginDefinitionError(f"Plugin `typeExtension` must be a mapping in {source}.")

    resolved: dict[SpecVersion, TypesExtension] = {}
    for version in SpecVersion:
        fn = extension.get(version.value)
        if fn is None:
            continue
        if not callable(fn):
            raise PluginDefinitionError(
                f"Plugin `typeExtension.{version.value}` must be callable in {source}."
            )
        resolved[version] = fn
    return resolved
