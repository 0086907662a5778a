"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console

from cli import context
from cli.ui_components import build_doctor_table
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import QueryShapeError, TransportError
from core.queries import verify_query_shapes

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_PING_QUERY = "query Ping { __typename }"


def _check_queries() -> tuple[bool, str]:
    try:
        verify_query_shapes()
    except QueryShapeError as exc:
        return False, str(exc)
    return True, "ListOrbs, ValidateOrb"


def _check_endpoint(settings: AppSettings) -> tuple[bool, str]:
    try:
        with context.open_transport(settings) as transport:
            transport.execute(_PING_QUERY, {}, settings.endpoint)
    except TransportError as exc:
        return False, str(exc)
    return True, "GraphQL endpoint answered"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = context.settings_from_context(ctx)

    table = build_doctor_table()

    # Config
    table.add_row("Endpoint", "OK", settings.endpoint)
    if settings.token:
        table.add_row("API token", "OK", "Sent as Authorization header")
    else:
        table.add_row("API token", "OPTIONAL", "No token set -> anonymous requests")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    ok_queries, detail_queries = _check_queries()
    table.add_row("Query shapes", "OK" if ok_queries else "FAIL", detail_queries)

    ok_http, detail_http = _check_endpoint(settings)
    table.add_row("Endpoint connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Use `orbctl doctor setup` or `--endpoint` to point at a reachable server."
        )
    if not (ok_queries and ok_http):
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup(ctx: typer.Context) -> None:
    """Interactive setup (stores endpoint and token in the user config .env)."""

    settings = context.settings_from_context(ctx)

    endpoint = typer.prompt(
        "GraphQL endpoint",
        default=settings.endpoint,
        show_default=True,
    ).strip()
    token = typer.prompt(
        "API token (empty keeps the current one)",
        default="",
        show_default=False,
        hide_input=True,
    ).strip()

    if not endpoint:
        raise typer.BadParameter("endpoint is required")

    env_path = write_user_env_vars(
        {
            "ORBCTL_ENDPOINT": endpoint,
            "ORBCTL_TOKEN": token or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
