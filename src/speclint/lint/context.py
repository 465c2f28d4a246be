"""Per-rule reporting context handed to rule callables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from speclint.model import Location, Problem
from speclint.types import Severity


@dataclass
class RuleContext:
    """Collects the problems one rule reports against one document."""

    rule_id: str
    severity: Severity
    source: str
    options: dict[str, Any] = field(default_factory=dict)
    problems: list[Problem] = field(default_factory=list)

    def report(
        self,
        message: str,
        pointer: str | None,
        *,
        report_on_key: bool = False,
        suggest: Sequence[str] = (),
    ) -> None:
        """Record a problem at ``pointer`` with this rule's configured severity."""
        self.problems.append(
            Problem(
                rule_id=self.rule_id,
                severity=self.severity,
                message=message,
                location=(Location(source=self.source, pointer=pointer, report_on_key=report_on_key),),
                suggest=tuple(suggest),
            )
        )
