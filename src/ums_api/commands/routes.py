"""Routes command for the UMS API."""

from __future__ import annotations

from typing import Any

import typer
from fastapi import FastAPI
from fastapi.routing import APIRoute

from ums_api.commands import common

EXCLUDED_METHODS = {"HEAD", "OPTIONS"}
METHOD_ORDER = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _required_permissions(route: APIRoute) -> list[str]:
    required: set[str] = set()
    for dependency in route.dependencies:
        required.update(getattr(dependency.dependency, "required_permissions", ()))
    return sorted(required)


def _method_key(method: str) -> int:
    return METHOD_ORDER.index(method) if method in METHOD_ORDER else len(METHOD_ORDER)


def collect_routes(app: FastAPI) -> list[dict[str, Any]]:
    """Return one entry per (path, method) with the permissions it requires."""

    collected: list[dict[str, Any]] = []
    for route in app.routes:
        if not isinstance(route, APIRoute):
            continue
        required = _required_permissions(route)
        for method in sorted(route.methods or (), key=_method_key):
            if method in EXCLUDED_METHODS:
                continue
            collected.append(
                {
                    "method": method,
                    "path": route.path,
                    "permissions": required,
                    "summary": route.summary or route.name,
                }
            )
    collected.sort(key=lambda item: (item["path"], _method_key(item["method"])))
    return collected


def run_routes(*, as_json: bool = False) -> None:
    """List API routes and the permissions they require."""

    from ums_api.main import create_app
    from ums_api.settings import Settings

    routes = collect_routes(create_app(Settings(seed_users=False)))
    if as_json:
        common.emit_json(routes)
        return
    for entry in routes:
        permissions = ",".join(entry["permissions"]) or "-"
        typer.echo(f"{entry['method']:<7} {entry['path']:<36} {permissions}")


def register(app: typer.Typer) -> None:
    @app.command(name="routes", help=run_routes.__doc__)
    def routes(
        as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
    ) -> None:
        run_routes(as_json=as_json)
