"""ums-api: CLI for the UMS API."""

from __future__ import annotations

import typer

from ums_api.commands import register_all

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="UMS API CLI (start, routes, roles, check).",
)


@app.callback()
def _main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


register_all(app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
