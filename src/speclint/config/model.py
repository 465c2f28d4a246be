"""Config facade composed once per lint invocation."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from speclint.config.ignore import IgnoreStore
from speclint.config.merge import RuleTable, merge_fragments
from speclint.config.plugins import Plugin, PluginLoader, RuleSet, build_plugin_list
from speclint.config.presets import resolve_presets
from speclint.config.settings import SettingsResolver, UnusedIdentifiers
from speclint.constants.config import (
    DEFAULT_PRESET,
    DO_NOT_RESOLVE_EXAMPLES_KEY,
    EXTENDS_KEY,
    PLUGINS_KEY,
)
from speclint.constants.presets import BUILTIN_PRESETS
from speclint.exceptions import ConfigError
from speclint.model import Problem
from speclint.types import RuleKind, SpecVersion

logger = logging.getLogger(__name__)

# Order in which rule sets run for a spec version.
RULE_SET_ORDER: tuple[RuleKind, ...] = (RuleKind.PREPROCESSORS, RuleKind.RULES, RuleKind.DECORATORS)

INLINE_FRAGMENT_LABEL: str = "inline config"


class LintConfig:
    """Resolved lint configuration: plugins, effective rule tables, and suppressions.

    Construction runs the whole pipeline (plugin registration, preset
    resolution, merge, ignore-file load) and raises ConfigError on any
    failure. Queries never raise for unknown identifiers; they resolve to
    ``off``. One instance serves one lint invocation.
    """

    def __init__(
        self,
        raw: Mapping[str, Any] | None = None,
        config_file: Path | str | None = None,
        *,
        plugin_loader: PluginLoader | None = None,
    ) -> None:
        raw = dict(raw or {})
        self.raw = raw
        self.config_file = Path(config_file) if config_file is not None else None
        self.config_dir = Path(os.path.abspath(self.config_file.parent if self.config_file else Path.cwd()))

        plugins_raw = raw.get(PLUGINS_KEY)
        if plugins_raw is not None and not isinstance(plugins_raw, list):
            raise ConfigError("`plugins` must be a list")
        self.plugins: tuple[Plugin, ...] = build_plugin_list(
            plugins_raw,
            config_file=self.config_file,
            loader=plugin_loader,
        )
        self.do_not_resolve_examples = bool(raw.get(DO_NOT_RESOLVE_EXAMPLES_KEY, False))

        extends = raw.get(EXTENDS_KEY)
        self.recommended_fallback = extends is None
        if extends is None:
            logger.debug("No `extends` configured, falling back to the %s preset", DEFAULT_PRESET)
            fragments = [BUILTIN_PRESETS[DEFAULT_PRESET]]
            labels = [DEFAULT_PRESET]
        else:
            if not isinstance(extends, list):
                raise ConfigError("`extends` must be a list of preset names")
            fragments = resolve_presets(extends, self.plugins)
            labels = [str(name) for name in extends]

        inline = _inline_fragment(raw)
        if inline:
            fragments.append(inline)
            labels.append(INLINE_FRAGMENT_LABEL)

        self.tables: dict[RuleKind, RuleTable] = merge_fragments(fragments, labels=labels)
        self._settings = SettingsResolver(self.tables)

        self.ignore = IgnoreStore(self.config_dir)
        self.ignore.load()

    @property
    def rules(self) -> RuleTable:
        return self.tables[RuleKind.RULES]

    @property
    def preprocessors(self) -> RuleTable:
        return self.tables[RuleKind.PREPROCESSORS]

    @property
    def decorators(self) -> RuleTable:
        return self.tables[RuleKind.DECORATORS]

    def get_rule_settings(self, rule_id: str, version: SpecVersion) -> dict[str, Any]:
        return self._settings.resolve(RuleKind.RULES, rule_id, version)

    def get_preprocessor_settings(self, preprocessor_id: str, version: SpecVersion) -> dict[str, Any]:
        return self._settings.resolve(RuleKind.PREPROCESSORS, preprocessor_id, version)

    def get_decorator_settings(self, decorator_id: str, version: SpecVersion) -> dict[str, Any]:
        return self._settings.resolve(RuleKind.DECORATORS, decorator_id, version)

    def get_settings(self, kind: RuleKind, identifier: str, version: SpecVersion) -> dict[str, Any]:
        """Resolve a setting for any family."""
        return self._settings.resolve(kind, identifier, version)

    def get_unused_rules(self) -> UnusedIdentifiers:
        """Configured identifiers never queried for any version that was linted."""
        return self._settings.unused_identifiers()

    def get_rules_for_spec_version(self, version: SpecVersion) -> list[RuleSet]:
        """Rule sets for ``version``: preprocessors, then rules, then decorators, in plugin order."""
        rule_sets: list[RuleSet] = []
        for kind in RULE_SET_ORDER:
            for plugin in self.plugins:
                rule_set = plugin.rule_set(kind, version)
                if rule_set is not None:
                    rule_sets.append(rule_set)
        return rule_sets

    def skip_rules(self, rule_ids: Iterable[str] | None = None) -> None:
        self.rules.skip(rule_ids or ())

    def skip_preprocessors(self, preprocessor_ids: Iterable[str] | None = None) -> None:
        self.preprocessors.skip(preprocessor_ids or ())

    def skip_decorators(self, decorator_ids: Iterable[str] | None = None) -> None:
        self.decorators.skip(decorator_ids or ())

    def extend_types(self, types: dict[str, Any], version: SpecVersion) -> dict[str, Any]:
        """Apply each plugin's type extension for exactly ``version``, in plugin order."""
        extended = types
        for plugin in self.plugins:
            extension = plugin.type_extension.get(version)
            if extension is not None:
                extended = extension(extended, version)
        return extended

    def add_ignore(self, problem: Problem) -> None:
        self.ignore.add(problem)

    def check_ignore(self, problem: Problem) -> Problem:
        return self.ignore.check(problem)

    def save_ignore(self) -> Path:
        return self.ignore.save()


@dataclass(frozen=True)
class ResolveHeader:
    """An HTTP header attached to reference resolution for matching URLs."""

    name: str
    matches: str
    value: str | None = None
    env_variable: str | None = None


@dataclass(frozen=True)
class HttpResolveConfig:
    headers: tuple[ResolveHeader, ...] = ()


@dataclass(frozen=True)
class ResolveConfig:
    http: HttpResolveConfig = field(default_factory=HttpResolveConfig)


class Config:
    """Top-level configuration document wrapping the lint section."""

    def __init__(
        self,
        raw: Mapping[str, Any] | None = None,
        config_file: Path | str | None = None,
        *,
        plugin_loader: PluginLoader | None = None,
    ) -> None:
        raw = dict(raw or {})
        self.raw = raw
        self.config_file = Path(config_file) if config_file is not None else None
        self.api_definitions: dict[str, str] = dict(_mapping(raw, "apiDefinitions"))
        self.reference_docs: dict[str, Any] = dict(_mapping(raw, "referenceDocs"))
        self.lint = LintConfig(_mapping(raw, "lint"), config_file, plugin_loader=plugin_loader)
        self.resolve = ResolveConfig(http=HttpResolveConfig(headers=_parse_headers(raw)))


def _inline_fragment(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Collect the document's own rule families into one final fragment."""
    keys = [kind.value for kind in RuleKind]
    keys += [kind.version_key(version) for kind in RuleKind for version in SpecVersion]
    return {key: raw[key] for key in keys if raw.get(key) is not None}


def _mapping(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"`{key}` must be a mapping")
    return value


def _parse_headers(raw: Mapping[str, Any]) -> tuple[ResolveHeader, ...]:
    http = _mapping(_mapping(raw, "resolve"), "http")
    headers_raw: Sequence[Any] = http.get("headers") or []
    if not isinstance(headers_raw, list):
        raise ConfigError("`resolve.http.headers` must be a list")

    headers: list[ResolveHeader] = []
    for index, item in enumerate(headers_raw):
        if not isinstance(item, Mapping) or not item.get("name") or not item.get("matches"):
            raise ConfigError(f"`resolve.http.headers[{index}]` must define `name` and `matches`")
        value = item.get("value")
        env_variable = item.get("envVariable")
        if (value is None) == (env_variable is None):
            raise ConfigError(f"`resolve.http.headers[{index}]` must define exactly one of `value` or `envVariable`")
        headers.append(
            ResolveHeader(
                name=str(item["name"]),
                matches=str(item["matches"]),
                value=None if value is None else str(value),
                env_variable=None if env_variable is None else str(env_variable),
            )
        )
    return tuple(headers)
