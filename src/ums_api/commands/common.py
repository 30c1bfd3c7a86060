"""Shared helpers for the UMS API CLI."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Iterable

import typer


def run(command: Iterable[str], *, env: dict[str, str] | None = None) -> None:
    cmd_list = list(command)
    typer.echo(f"-> {' '.join(cmd_list)}", err=True)
    completed = subprocess.run(cmd_list, env=env, check=False)
    if completed.returncode != 0:
        raise typer.Exit(code=completed.returncode)


def emit_json(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))
