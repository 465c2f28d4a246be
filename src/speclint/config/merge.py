"""Fold preset fragments and inline rules into per-version rule tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from speclint.constants.config import (
    EXTENDS_KEY,
    RULE_SEVERITIES,
    SEVERITY_ERROR,
    SEVERITY_OFF,
    SEVERITY_ON,
    TOGGLE_SEVERITIES,
)
from speclint.exceptions import ConfigError, NestedExtendsError
from speclint.types import RuleKind, RuleSetting, SeveritySetting, SpecVersion, StructuredSetting

logger = logging.getLogger(__name__)


class RuleTable:
    """Effective settings of one family, keyed by spec version then identifier."""

    def __init__(self, kind: RuleKind, entries: Mapping[SpecVersion, Mapping[str, RuleSetting]]) -> None:
        self.kind = kind
        self._entries: dict[SpecVersion, dict[str, RuleSetting]] = {
            version: dict(entries.get(version, {})) for version in SpecVersion
        }

    def get(self, identifier: str, version: SpecVersion) -> RuleSetting | None:
        """Return the setting for ``identifier`` under ``version``, if configured."""
        return self._entries[version].get(identifier)

    def identifiers(self, version: SpecVersion) -> tuple[str, ...]:
        """Configured identifiers for ``version`` in merge order."""
        return tuple(self._entries[version])

    def as_dict(self, version: SpecVersion) -> dict[str, RuleSetting]:
        """Return a copy of the table for ``version``."""
        return dict(self._entries[version])

    def skip(self, identifiers: Iterable[str]) -> None:
        """Force configured ``identifiers`` to ``off`` in every version."""
        for identifier in identifiers:
            for table in self._entries.values():
                if identifier in table:
                    table[identifier] = SeveritySetting(SEVERITY_OFF)

    def __repr__(self) -> str:
        counts = ", ".join(f"{version.value}={len(table)}" for version, table in self._entries.items())
        return f"RuleTable({self.kind.value}: {counts})"


def parse_setting(value: Any, kind: RuleKind, identifier: str) -> RuleSetting:
    """Decide the shape of a raw setting once, rejecting values no shape accepts."""
    allowed = RULE_SEVERITIES if kind is RuleKind.RULES else TOGGLE_SEVERITIES
    if value is None or value is False:
        return SeveritySetting(SEVERITY_OFF)
    if value is True:
        # YAML 1.1 reads bare `on` as a boolean.
        return SeveritySetting(SEVERITY_ERROR if kind is RuleKind.RULES else SEVERITY_ON)
    if isinstance(value, str):
        if value not in allowed:
            raise ConfigError(
                f"Invalid severity {value!r} for {kind.value} `{identifier}`; "
                f"expected one of: {', '.join(sorted(allowed))}"
            )
        return SeveritySetting(value)
    if isinstance(value, Mapping):
        severity = value.get("severity")
        if isinstance(severity, bool):
            severity = SEVERITY_ERROR if severity else SEVERITY_OFF
        if severity is not None and (not isinstance(severity, str) or severity not in RULE_SEVERITIES):
            raise ConfigError(
                f"Invalid severity {severity!r} for {kind.value} `{identifier}`; "
                f"expected one of: {', '.join(sorted(RULE_SEVERITIES))}"
            )
        options = {key: item for key, item in value.items() if key != "severity"}
        return StructuredSetting(severity=severity, options=options)
    raise ConfigError(
        f"Invalid setting for {kind.value} `{identifier}`: expected a severity or a mapping, "
        f"got {type(value).__name__}"
    )


def merge_fragments(
    fragments: Sequence[Mapping[str, Any]],
    *,
    labels: Sequence[str] | None = None,
) -> dict[RuleKind, RuleTable]:
    """Merge ordered fragments into one effective table per family.

    Later fragments win. Generic entries of a fragment refine version-scoped
    entries that earlier fragments established, but never create new ones.
    """
    names = list(labels) if labels is not None else [f"fragment #{index}" for index in range(len(fragments))]
    for name, fragment in zip(names, fragments, strict=True):
        if fragment.get(EXTENDS_KEY) is not None:
            raise NestedExtendsError(f"`extends` is not supported in shared configs yet: {name}.")

    tables = {kind: _merge_family(kind, fragments, names) for kind in RuleKind}
    logger.debug("Merged %d config fragments: %s", len(fragments), ", ".join(map(repr, tables.values())))
    return tables


def _merge_family(kind: RuleKind, fragments: Sequence[Mapping[str, Any]], names: Sequence[str]) -> RuleTable:
    generic: dict[str, RuleSetting] = {}
    scoped: dict[SpecVersion, dict[str, RuleSetting]] = {version: {} for version in SpecVersion}

    for name, fragment in zip(names, fragments, strict=True):
        fragment_generic = _read_section(fragment, kind.value, kind, name)
        generic.update(fragment_generic)
        for version, table in scoped.items():
            table.update(_read_section(fragment, kind.version_key(version), kind, name))
            for identifier, setting in fragment_generic.items():
                if identifier in table:
                    table[identifier] = setting

    return RuleTable(kind, {version: {**generic, **table} for version, table in scoped.items()})


def _read_section(fragment: Mapping[str, Any], key: str, kind: RuleKind, name: str) -> dict[str, RuleSetting]:
    section = fragment.get(key)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"`{key}` must be a mapping in {name}")
    return {str(identifier): parse_setting(value, kind, str(identifier)) for identifier, value in section.items()}
