"""Tests for collect-all config validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from speclint.config import validate_config_file
from speclint.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007, CFG008
from speclint.exceptions.validation import format_errors


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / ".speclint.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "lint:\n  extends: [recommended, acme/strict]\n  rules:\n    info-license: warn\n"
        "  oas3Preprocessors:\n    strip: on\n",
    )

    assert validate_config_file(path) == []


def test_missing_file_only_errors_when_explicit(tmp_path: Path) -> None:
    path = tmp_path / "missing.yaml"

    assert validate_config_file(path) == []
    assert [e.code for e in validate_config_file(path, config_explicit=True)] == [CFG001]


@pytest.mark.parametrize(
    ("text", "code"),
    [
        ("lint: [unclosed\n", CFG002),
        ("- a\n", CFG003),
        ("lint: 3\n", CFG008),
    ],
    ids=["bad-yaml", "not-mapping", "lint-not-mapping"],
)
def test_structural_errors(tmp_path: Path, text: str, code: str) -> None:
    errors = validate_config_file(_write(tmp_path, text))

    assert [e.code for e in errors] == [code]


def test_unknown_keys_get_did_you_mean_hint(tmp_path: Path) -> None:
    errors = validate_config_file(_write(tmp_path, "lint:\n  rulez: {}\n"))

    assert len(errors) == 1
    assert errors[0].code == CFG004
    assert errors[0].field == "lint.rulez"
    assert errors[0].hint == "did you mean `rules`?"


def test_collects_every_problem(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "\n".join(
            [
                "lint:",
                "  extends: [recomended]",
                "  doNotResolveExamples: yes-please",
                "  rules:",
                "    info-license: loud",
                "    info-contact: 5",
                "  decorators: [a]",
            ]
        )
        + "\n",
    )

    codes = sorted(e.code for e in validate_config_file(path))

    assert codes == sorted([CFG007, CFG005, CFG006, CFG005, CFG008])


def test_format_errors_is_one_line_per_error(tmp_path: Path) -> None:
    errors = validate_config_file(_write(tmp_path, "lint:\n  extends: [recomended]\n"))

    rendered = format_errors(errors)

    assert rendered.startswith(f"[{CFG007}]")
    assert "lint.extends[0]" in rendered
    assert "did you mean `recommended`?" in rendered


def test_resolve_section_is_checked(tmp_path: Path) -> None:
    path = _write(tmp_path, "resolve:\n  http:\n    headers: {}\n    retries: 3\n")

    errors = validate_config_file(path)

    assert [(e.code, e.field) for e in errors] == [
        (CFG004, "resolve.http.retries"),
        (CFG005, "resolve.http.headers"),
    ]


def test_invalid_utf8_is_reported_not_raised(tmp_path: Path) -> None:
    path = tmp_path / ".speclint.yaml"
    path.write_bytes(b"lint:\n  rules: \xff\n")

    errors = validate_config_file(path)

    assert [e.code for e in errors] == [CFG002]
    assert "not valid UTF-8" in errors[0].message
