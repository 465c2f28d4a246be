"""Severity/options normalization and the usage ledger for unused-config diagnostics."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from speclint.config.merge import RuleTable
from speclint.constants.config import SEVERITY_ERROR, SEVERITY_OFF, SEVERITY_ON
from speclint.types import RuleKind, RuleSetting, SeveritySetting, SpecVersion


@dataclass(frozen=True)
class UnusedIdentifiers:
    """Configured identifiers that no query ever asked about."""

    rules: tuple[str, ...] = ()
    preprocessors: tuple[str, ...] = ()
    decorators: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """Whether every family is free of unused identifiers."""
        return not (self.rules or self.preprocessors or self.decorators)


@dataclass
class UsageLedger:
    """Identifiers and spec versions queried during one lint invocation."""

    identifiers: set[str] = field(default_factory=set)
    versions: set[SpecVersion] = field(default_factory=set)

    def record(self, identifier: str, version: SpecVersion) -> None:
        self.identifiers.add(identifier)
        self.versions.add(version)


def normalize_setting(setting: RuleSetting | None, kind: RuleKind) -> dict[str, Any]:
    """Produce the canonical ``{severity, ...options}`` record for a setting."""
    if setting is None:
        return {"severity": SEVERITY_OFF}
    if isinstance(setting, SeveritySetting):
        if setting.tag == SEVERITY_ON and kind is not RuleKind.RULES:
            return {"severity": SEVERITY_ERROR}
        return {"severity": setting.tag}
    return {"severity": setting.severity or SEVERITY_ERROR, **setting.options}


class SettingsResolver:
    """Answers per-identifier setting queries and remembers what was asked."""

    def __init__(self, tables: Mapping[RuleKind, RuleTable]) -> None:
        self._tables = tables
        self.ledger = UsageLedger()

    def resolve(self, kind: RuleKind, identifier: str, version: SpecVersion) -> dict[str, Any]:
        """Return the canonical setting; unconfigured identifiers resolve to ``off``."""
        self.ledger.record(identifier, version)
        return normalize_setting(self._tables[kind].get(identifier, version), kind)

    def unused_identifiers(self) -> UnusedIdentifiers:
        """Identifiers configured for a queried version but never queried themselves."""
        versions = [version for version in SpecVersion if version in self.ledger.versions]
        unused: dict[RuleKind, list[str]] = {kind: [] for kind in RuleKind}
        for kind, names in unused.items():
            for version in versions:
                for identifier in self._tables[kind].identifiers(version):
                    if identifier not in self.ledger.identifiers and identifier not in names:
                        names.append(identifier)
        return UnusedIdentifiers(
            rules=tuple(unused[RuleKind.RULES]),
            preprocessors=tuple(unused[RuleKind.PREPROCESSORS]),
            decorators=tuple(unused[RuleKind.DECORATORS]),
        )
