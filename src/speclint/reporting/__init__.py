"""Output rendering for lint problems."""

from .stdout import render_problems, render_problems_json, render_unused

__all__ = ["render_problems", "render_problems_json", "render_unused"]
