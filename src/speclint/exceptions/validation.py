"""Structured validation error model for config validation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single config problem with a stable code and the dotted key it concerns."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = f"{self.path}#{self.field}" if self.field else self.path
        text = f"[{self.code}] {location} {self.message}"
        return f"{text} ({self.hint})" if self.hint else text


def format_errors(errors: list[ValidationError]) -> str:
    """Format validation errors one per line, ordered by code then key."""
    ordered = sorted(errors, key=lambda e: (e.code, e.path, e.field))
    return "\n".join(error.format() for error in ordered)
