"""Core data models for Speclint."""

from .entities import Location, Problem

__all__ = ["Location", "Problem"]
