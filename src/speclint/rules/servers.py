"""Server object rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from speclint.lint.context import RuleContext

EMPTY_ENUM_MESSAGE: str = "Server variable with `enum` must be a non-empty array."
INVALID_DEFAULT_MESSAGE: str = (
    "Server variable define `enum` and `default`. `enum` must include default value"
)


def _enum_errors(server: Any) -> list[str]:
    if not isinstance(server, dict):
        return []
    variables = server.get("variables")
    if not isinstance(variables, dict):
        return []

    errors: list[str] = []
    for variable in variables.values():
        enum = variable.get("enum") if isinstance(variable, dict) else None
        if not isinstance(enum, list):
            continue
        if not enum:
            errors.append(EMPTY_ENUM_MESSAGE)
        default = variable.get("default")
        if not default:
            continue
        if default not in enum:
            errors.append(INVALID_DEFAULT_MESSAGE)
    return errors


def no_empty_enum_servers(document: dict[str, Any], ctx: RuleContext) -> None:
    """Report server variables whose `enum` is empty or misses the `default` value."""
    servers = document.get("servers")
    if not isinstance(servers, list) or not servers:
        return

    for server in servers:
        for message in _enum_errors(server):
            ctx.report(message, "#/servers", report_on_key=True)
