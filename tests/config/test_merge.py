"""Tests for fragment merging and setting parsing."""

from __future__ import annotations

import pytest

from speclint.config.merge import merge_fragments, parse_setting
from speclint.exceptions import ConfigError, NestedExtendsError
from speclint.types import RuleKind, SeveritySetting, SpecVersion, StructuredSetting

FAMILIES = [RuleKind.RULES, RuleKind.PREPROCESSORS, RuleKind.DECORATORS]


@pytest.mark.parametrize("kind", FAMILIES, ids=lambda kind: kind.value)
@pytest.mark.parametrize("version", list(SpecVersion), ids=lambda version: version.value)
def test_later_fragment_wins_for_generic_entries(kind: RuleKind, version: SpecVersion) -> None:
    tables = merge_fragments([{kind.value: {"x": "warn"}}, {kind.value: {"x": "error"}}])

    assert tables[kind].get("x", version) == SeveritySetting("error")


@pytest.mark.parametrize("kind", FAMILIES, ids=lambda kind: kind.value)
@pytest.mark.parametrize("version", list(SpecVersion), ids=lambda version: version.value)
def test_later_fragment_wins_for_version_entries(kind: RuleKind, version: SpecVersion) -> None:
    key = kind.version_key(version)
    tables = merge_fragments([{key: {"x": "warn"}}, {key: {"x": "off"}}])

    assert tables[kind].get("x", version) == SeveritySetting("off")


def test_generic_override_never_creates_version_entry() -> None:
    tables = merge_fragments([{"oas3Rules": {"scoped": "error"}}, {"rules": {"generic": "warn"}}])
    rules = tables[RuleKind.RULES]

    assert rules.get("generic", SpecVersion.OAS2) == SeveritySetting("warn")
    assert rules.get("generic", SpecVersion.OAS3) == SeveritySetting("warn")
    assert rules.get("scoped", SpecVersion.OAS2) is None
    assert rules.get("scoped", SpecVersion.OAS3) == SeveritySetting("error")


def test_generic_override_refines_existing_version_entry() -> None:
    tables = merge_fragments([{"oas3Rules": {"x": "error"}}, {"rules": {"x": "off"}}])
    rules = tables[RuleKind.RULES]

    assert rules.get("x", SpecVersion.OAS3) == SeveritySetting("off")
    assert rules.get("x", SpecVersion.OAS2) == SeveritySetting("off")


def test_generic_entry_overlays_version_entry_in_same_fragment() -> None:
    tables = merge_fragments([{"rules": {"x": "warn"}, "oas2Rules": {"x": "error"}}])
    rules = tables[RuleKind.RULES]

    assert rules.get("x", SpecVersion.OAS2) == SeveritySetting("warn")
    assert rules.get("x", SpecVersion.OAS3) == SeveritySetting("warn")


def test_later_version_entry_beats_earlier_generic_entry() -> None:
    tables = merge_fragments([{"rules": {"x": "off"}}, {"oas3Rules": {"x": "warn"}}])
    rules = tables[RuleKind.RULES]

    assert rules.get("x", SpecVersion.OAS3) == SeveritySetting("warn")
    assert rules.get("x", SpecVersion.OAS2) == SeveritySetting("off")


def test_effective_keys_follow_merge_order() -> None:
    tables = merge_fragments([{"rules": {"b": "warn", "a": "warn"}}, {"oas3Rules": {"c": "error"}}])

    assert tables[RuleKind.RULES].identifiers(SpecVersion.OAS3) == ("b", "a", "c")
    assert tables[RuleKind.RULES].identifiers(SpecVersion.OAS2) == ("b", "a")


def test_nested_extends_is_rejected_with_label() -> None:
    with pytest.raises(NestedExtendsError, match="shared-preset"):
        merge_fragments([{"extends": ["recommended"], "rules": {}}], labels=["shared-preset"])


def test_family_section_must_be_mapping() -> None:
    with pytest.raises(ConfigError, match="`oas2Decorators` must be a mapping in inline config"):
        merge_fragments([{"oas2Decorators": ["x"]}], labels=["inline config"])


def test_skip_turns_configured_entries_off_everywhere() -> None:
    tables = merge_fragments([{"rules": {"x": "error"}, "oas3Rules": {"y": {"severity": "warn"}}}])
    rules = tables[RuleKind.RULES]

    rules.skip(["x", "y", "missing"])

    assert rules.get("x", SpecVersion.OAS2) == SeveritySetting("off")
    assert rules.get("x", SpecVersion.OAS3) == SeveritySetting("off")
    assert rules.get("y", SpecVersion.OAS3) == SeveritySetting("off")
    assert rules.get("y", SpecVersion.OAS2) is None
    assert rules.get("missing", SpecVersion.OAS3) is None


@pytest.mark.parametrize(
    ("value", "kind", "expected"),
    [
        ("warn", RuleKind.RULES, SeveritySetting("warn")),
        ("on", RuleKind.DECORATORS, SeveritySetting("on")),
        (None, RuleKind.RULES, SeveritySetting("off")),
        ({"max": 3}, RuleKind.RULES, StructuredSetting(severity=None, options={"max": 3})),
        (
            {"severity": "warn", "options": {"a": 1}},
            RuleKind.PREPROCESSORS,
            StructuredSetting(severity="warn", options={"options": {"a": 1}}),
        ),
    ],
    ids=["bare", "toggle-on", "null", "structured", "structured-with-severity"],
)
def test_parse_setting_shapes(value, kind: RuleKind, expected) -> None:
    assert parse_setting(value, kind, "x") == expected


@pytest.mark.parametrize(
    ("value", "kind", "match"),
    [
        ("on", RuleKind.RULES, "Invalid severity 'on' for rules `x`"),
        ("fatal", RuleKind.PREPROCESSORS, "Invalid severity 'fatal'"),
        ({"severity": "loud"}, RuleKind.RULES, "Invalid severity 'loud'"),
        (3, RuleKind.RULES, "expected a severity or a mapping"),
    ],
    ids=["on-for-rule", "unknown-tag", "unknown-structured", "wrong-type"],
)
def test_parse_setting_rejects_invalid_values(value, kind: RuleKind, match: str) -> None:
    with pytest.raises(ConfigError, match=match):
        parse_setting(value, kind, "x")
