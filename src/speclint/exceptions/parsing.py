"""Document-related exceptions."""

from __future__ import annotations

from speclint.exceptions.base import SpeclintError


class DocumentError(SpeclintError, ValueError):
    """Raised when an API definition cannot be linted."""
