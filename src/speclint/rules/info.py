"""Info object rules shared by every spec version."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from speclint.lint.context import RuleContext


def _require_info_field(document: dict[str, Any], ctx: RuleContext, field_name: str) -> None:
    info = document.get("info")
    if not isinstance(info, dict):
        return
    if not info.get(field_name):
        ctx.report(f"Info object should contain `{field_name}` field.", "#/info", report_on_key=True)


def info_license(document: dict[str, Any], ctx: RuleContext) -> None:
    """Require `info.license`."""
    _require_info_field(document, ctx, "license")


def info_contact(document: dict[str, Any], ctx: RuleContext) -> None:
    """Require `info.contact`."""
    _require_info_field(document, ctx, "contact")
