"""Command registrations for the UMS API CLI."""

from __future__ import annotations

import typer

from . import rbac, routes, server

COMMAND_MODULES = (
    server,
    routes,
    rbac,
)


def register_all(app: typer.Typer) -> None:
    for module in COMMAND_MODULES:
        module.register(app)
