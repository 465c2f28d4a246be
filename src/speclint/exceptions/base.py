"""Root of the Speclint exception hierarchy."""

from __future__ import annotations


class SpeclintError(Exception):
    """Base class for all errors raised by Speclint."""
