"""Thin lint runner executing configured rules against a parsed document."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from speclint.config.model import LintConfig
from speclint.constants.config import SEVERITY_OFF
from speclint.exceptions import DocumentError
from speclint.lint.context import RuleContext
from speclint.model import Problem
from speclint.types import RuleKind, SpecVersion

logger = logging.getLogger(__name__)


def detect_spec_version(document: dict[str, Any]) -> SpecVersion:
    """Return the spec version declared by ``openapi``/``swagger``."""
    openapi = document.get("openapi")
    if isinstance(openapi, str) and openapi.startswith("3."):
        return SpecVersion.OAS3
    swagger = document.get("swagger")
    if isinstance(swagger, str) and swagger.startswith("2."):
        return SpecVersion.OAS2
    raise DocumentError("Unsupported document: expected `openapi: 3.x` or `swagger: \"2.0\"`")


def load_document(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON API definition from disk."""
    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DocumentError(f"Cannot read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DocumentError(f"Document at {path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise DocumentError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(document, dict):
        raise DocumentError(f"Document at {path} must be a mapping")
    return document


def lint_document(document: dict[str, Any], config: LintConfig, *, source: str = "") -> list[Problem]:
    """Run preprocessors then rules for the document's spec version.

    Decorators only transform documents for bundling, so linting skips them.
    Every reported problem passes through the config's ignore store.
    """
    version = detect_spec_version(document)
    working = copy.deepcopy(document)
    problems: list[Problem] = []

    for rule_set in config.get_rules_for_spec_version(version):
        if rule_set.kind is RuleKind.DECORATORS:
            continue
        for rule_id, rule in rule_set.rules.items():
            settings = config.get_settings(rule_set.kind, rule_id, version)
            severity = settings["severity"]
            if severity == SEVERITY_OFF:
                continue
            ctx = RuleContext(
                rule_id=rule_id,
                severity=severity,
                source=source,
                options={key: value for key, value in settings.items() if key != "severity"},
            )
            rule(working, ctx)
            problems.extend(config.check_ignore(problem) for problem in ctx.problems)

    logger.debug("Linted %s (%s): %d problems", source or "<document>", version.value, len(problems))
    return problems


def lint_file(path: Path, config: LintConfig) -> list[Problem]:
    """Load ``path`` and lint it, using its absolute path as the problem source."""
    return lint_document(load_document(path), config, source=os.path.abspath(path))
