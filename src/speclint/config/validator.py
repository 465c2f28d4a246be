"""Collect-all config file validation."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from speclint.constants.config import PLUGIN_ID_SEPARATOR, RULE_SEVERITIES, TOGGLE_SEVERITIES
from speclint.constants.presets import BUILTIN_PRESETS
from speclint.constants.validation import (
    ALLOWED_HTTP_KEYS,
    ALLOWED_LINT_KEYS,
    ALLOWED_RESOLVE_KEYS,
    ALLOWED_ROOT_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from speclint.exceptions.validation import ValidationError
from speclint.types import RuleKind, SpecVersion


def validate_config_file(config_path: Path, *, config_explicit: bool = False) -> list[ValidationError]:
    """Validate a config file and return every problem found.

    Used by ``speclint validate-config`` and as the ``speclint lint``
    preflight. It never raises; all problems are returned as
    :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    path_str = str(config_path)

    if not config_path.exists():
        if config_explicit:
            errors.append(ValidationError(code=CFG001, path=path_str, field="", message="config file not found"))
        return errors

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors
    except UnicodeDecodeError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"not valid UTF-8: {exc}"))
        return errors

    if raw is None:
        return errors
    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    _check_unknown_keys(raw, ALLOWED_ROOT_KEYS, "", path_str, errors)
    _validate_resolve(raw, path_str, errors)

    lint = raw.get("lint")
    if lint is None:
        return errors
    if not isinstance(lint, dict):
        errors.append(ValidationError(code=CFG008, path=path_str, field="lint", message="`lint` must be a mapping"))
        return errors

    _check_unknown_keys(lint, ALLOWED_LINT_KEYS, "lint", path_str, errors)
    _validate_extends(lint, path_str, errors)
    _validate_rule_families(lint, path_str, errors)

    if "plugins" in lint and lint["plugins"] is not None and not isinstance(lint["plugins"], list):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="lint.plugins",
                message="invalid type for `plugins`",
                hint="expected a list of plugin references",
            )
        )
    if "doNotResolveExamples" in lint and not isinstance(lint["doNotResolveExamples"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="lint.doNotResolveExamples",
                message="invalid type for `doNotResolveExamples`",
                hint="expected a boolean",
            )
        )

    return errors


def _check_unknown_keys(
    raw: dict[str, Any],
    allowed: frozenset[str],
    prefix: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    for key in sorted(map(str, raw)):
        if key not in allowed:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"{prefix}.{key}" if prefix else key,
                    message=f"unknown key `{key}`",
                    hint=_suggest(key, allowed),
                )
            )


def _validate_resolve(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    resolve = raw.get("resolve")
    if resolve is None:
        return
    if not isinstance(resolve, dict):
        errors.append(ValidationError(code=CFG008, path=path_str, field="resolve", message="`resolve` must be a mapping"))
        return
    _check_unknown_keys(resolve, ALLOWED_RESOLVE_KEYS, "resolve", path_str, errors)

    http = resolve.get("http")
    if http is None:
        return
    if not isinstance(http, dict):
        errors.append(
            ValidationError(code=CFG008, path=path_str, field="resolve.http", message="`http` must be a mapping")
        )
        return
    _check_unknown_keys(http, ALLOWED_HTTP_KEYS, "resolve.http", path_str, errors)
    headers = http.get("headers")
    if headers is not None and not isinstance(headers, list):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="resolve.http.headers",
                message="invalid type for `headers`",
                hint="expected a list of header definitions",
            )
        )


def _validate_extends(lint: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Check `extends` shape; built-in names are checked, plugin presets need the plugins loaded."""
    if "extends" not in lint or lint["extends"] is None:
        return
    extends = lint["extends"]
    if not isinstance(extends, list) or not all(isinstance(item, str) for item in extends):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="lint.extends",
                message="invalid type for `extends`",
                hint="expected a list of preset names",
            )
        )
        return

    for index, name in enumerate(extends):
        if PLUGIN_ID_SEPARATOR in name or name in BUILTIN_PRESETS:
            continue
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=f"lint.extends[{index}]",
                message=f"there is no such built-in config `{name}`",
                hint=_suggest(name, frozenset(BUILTIN_PRESETS)),
            )
        )


def _validate_rule_families(lint: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    for kind in RuleKind:
        allowed = RULE_SEVERITIES if kind is RuleKind.RULES else TOGGLE_SEVERITIES
        for key in (kind.value, *(kind.version_key(version) for version in SpecVersion)):
            section = lint.get(key)
            if section is None:
                continue
            if not isinstance(section, dict):
                errors.append(
                    ValidationError(code=CFG008, path=path_str, field=f"lint.{key}", message=f"`{key}` must be a mapping")
                )
                continue
            for identifier, value in section.items():
                field_name = f"lint.{key}.{identifier}"
                if value is None or isinstance(value, bool):
                    continue
                if isinstance(value, dict):
                    severity = value.get("severity")
                    if isinstance(severity, bool):
                        continue
                    if severity is not None and (not isinstance(severity, str) or severity not in RULE_SEVERITIES):
                        errors.append(_severity_error(path_str, field_name, severity, RULE_SEVERITIES))
                elif isinstance(value, str):
                    if value not in allowed:
                        errors.append(_severity_error(path_str, field_name, value, allowed))
                else:
                    errors.append(
                        ValidationError(
                            code=CFG005,
                            path=path_str,
                            field=field_name,
                            message=f"invalid type for `{identifier}`",
                            hint="expected a severity or a mapping",
                        )
                    )


def _severity_error(path_str: str, field_name: str, value: Any, allowed: frozenset[str]) -> ValidationError:
    return ValidationError(
        code=CFG006,
        path=path_str,
        field=field_name,
        message=f"invalid severity {value!r}",
        hint=f"expected one of: {', '.join(sorted(allowed))}",
    )


def _suggest(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a close match, or an empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
