"""Problem entities exchanged with the lint runner and the ignore store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from speclint.types import Severity


@dataclass(frozen=True)
class Location:
    """A place in a source document, addressed by a JSON-Pointer-like string."""

    source: str
    pointer: str | None = None
    report_on_key: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly mapping."""
        return {
            "source": self.source,
            "pointer": self.pointer,
            "reportOnKey": self.report_on_key,
        }


@dataclass(frozen=True)
class Problem:
    """A reported rule violation; the first location is the primary one."""

    rule_id: str
    severity: Severity
    message: str
    location: tuple[Location, ...]
    suggest: tuple[str, ...] = ()
    ignored: bool = False

    @property
    def primary_location(self) -> Location | None:
        """Location used for suppression matching."""
        return self.location[0] if self.location else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly mapping."""
        payload: dict[str, Any] = {
            "ruleId": self.rule_id,
            "severity": self.severity,
            "message": self.message,
            "location": [loc.to_dict() for loc in self.location],
            "suggest": list(self.suggest),
        }
        if self.ignored:
            payload["ignored"] = True
        return payload
