"""Role catalog and authorization check commands."""

from __future__ import annotations

import typer

from ums_api.commands import common
from ums_api.core.auth import AuthenticationError
from ums_api.core.rbac import Permission, RoleRegistry
from ums_api.features.rbac.service import AuthorizationEngine
from ums_api.features.users.repository import InMemoryUsersRepository
from ums_api.features.users.seed import seed_users

EXIT_DENIED = 1
EXIT_BAD_CALLER = 2


def run_roles(*, as_json: bool = False) -> None:
    """Print the role catalog."""

    registry = RoleRegistry()
    if as_json:
        common.emit_json(
            [
                {
                    "code": role.code,
                    "name": role.name,
                    "permissions": sorted(role.permissions),
                }
                for role in registry.roles
            ]
        )
        return
    for role in registry.roles:
        permissions = ",".join(sorted(role.permissions)) or "-"
        typer.echo(f"{role.code:<10} {permissions:<24} {role.description}")


def run_check(caller: str, permissions: list[Permission]) -> None:
    """Evaluate CALLER against PERMISSION... using the demo directory."""

    engine = AuthorizationEngine(
        repository=InMemoryUsersRepository(seed_users()),
        registry=RoleRegistry(),
    )
    try:
        decision = engine.authorize(caller, permissions)
    except AuthenticationError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_CALLER) from exc

    if decision.allowed:
        typer.echo(f"allow caller={decision.caller_id} required={','.join(decision.required)}")
        return
    typer.echo(
        f"deny caller={decision.caller_id} missing={','.join(decision.missing)}",
    )
    raise typer.Exit(code=EXIT_DENIED)


def register(app: typer.Typer) -> None:
    @app.command(name="roles", help=run_roles.__doc__)
    def roles(
        as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
    ) -> None:
        run_roles(as_json=as_json)

    @app.command(name="check", help=run_check.__doc__)
    def check(
        caller: str = typer.Argument(..., help="Caller user id as sent in the caller header."),
        permissions: list[Permission] = typer.Argument(..., help="Permissions to require."),
    ) -> None:
        run_check(caller, permissions)
