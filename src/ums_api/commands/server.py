"""Server commands for the UMS API."""

from __future__ import annotations

import os
import sys

import typer

from ums_api.commands import common
from ums_api.settings import Settings

APP_IMPORT_PATH = "ums_api.main:app"


def build_uvicorn_command(
    settings: Settings,
    *,
    host: str | None = None,
    port: int | None = None,
    reload: bool = False,
) -> list[str]:
    host = host or settings.api_host
    port = port or settings.api_port
    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        APP_IMPORT_PATH,
        "--host",
        host,
        "--port",
        str(port),
        "--log-level",
        settings.logging_level.lower(),
    ]
    if reload:
        cmd.append("--reload")
    return cmd


def run_start(*, host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Start the API server."""

    settings = Settings()
    host = host or settings.api_host
    port = port or settings.api_port
    cmd = build_uvicorn_command(settings, host=host, port=port, reload=reload)
    typer.echo(f"Starting UMS API on http://{host}:{port}")
    common.run(cmd, env=os.environ.copy())


def register(app: typer.Typer) -> None:
    @app.command(name="start", help=run_start.__doc__)
    def start(
        host: str = typer.Option(
            None,
            "--host",
            help="Host/interface for the API server.",
            envvar="UMS_API_HOST",
        ),
        port: int = typer.Option(
            None,
            "--port",
            help="Port for the API server.",
            min=1,
            max=65535,
        ),
        reload: bool = typer.Option(
            False,
            "--reload",
            help="Restart the server when source files change.",
        ),
    ) -> None:
        run_start(host=host, port=port, reload=reload)
