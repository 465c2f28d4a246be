"""Human-readable and JSON rendering of lint problems."""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Sequence

from speclint.config.settings import UnusedIdentifiers
from speclint.constants.reporting import ANSI_DIM, ANSI_RESET, SEVERITY_COLORS
from speclint.model import Problem


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_severity(severity: str) -> str:
    color = SEVERITY_COLORS.get(severity, "")
    return _colorize(severity, color) if color else severity


def render_problems(problems: Sequence[Problem], *, color: bool = True) -> str:
    """Render one line per problem followed by a severity summary."""
    shown = [problem for problem in problems if not problem.ignored]
    lines: list[str] = []
    for problem in shown:
        location = problem.primary_location
        where = f"{location.source or '<document>'}{location.pointer or ''}" if location else "<unknown>"
        severity = _color_severity(problem.severity) if color else problem.severity
        rule = _colorize(problem.rule_id, ANSI_DIM) if color else problem.rule_id
        lines.append(f"  {where}  {severity}  {rule}  {problem.message}")

    counts = Counter(problem.severity for problem in shown)
    ignored = len(problems) - len(shown)
    summary = f"  {counts.get('error', 0)} error(s), {counts.get('warn', 0)} warning(s)"
    if ignored:
        summary += f", {ignored} ignored"
    lines.append(summary)
    return "\n".join(lines)


def render_problems_json(problems: Sequence[Problem]) -> str:
    """Render problems and totals as a stable JSON document."""
    shown = [problem for problem in problems if not problem.ignored]
    counts = Counter(problem.severity for problem in shown)
    payload = {
        "totals": {
            "errors": counts.get("error", 0),
            "warnings": counts.get("warn", 0),
            "ignored": len(problems) - len(shown),
        },
        "problems": [problem.to_dict() for problem in problems],
    }
    return json.dumps(payload, indent=2, sort_keys=True)


def render_unused(unused: UnusedIdentifiers) -> str:
    """Render configured-but-never-evaluated identifiers, or an empty string."""
    if unused.is_empty():
        return ""
    lines = ["  Configured but never evaluated:"]
    for family, identifiers in (
        ("rules", unused.rules),
        ("preprocessors", unused.preprocessors),
        ("decorators", unused.decorators),
    ):
        if identifiers:
            lines.append(f"    {family}: {', '.join(identifiers)}")
    return "\n".join(lines)
