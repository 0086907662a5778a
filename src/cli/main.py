"""CLI principal (Typer).

Por qué la CLI es delgada:
- Solo parsea flags, carga el documento y decide qué imprimir.
- La paginación y la validación viven en `core.services`, testeables con
  un transporte fake.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.orb_file import load_orb_document
from cli import context, doctor
from cli.logging_config import configure_logging
from cli.ui_components import print_error, print_success
from core.config import load_settings
from core.domain.errors import OrbCtlError
from core.queries import verify_query_shapes
from core.services.orb_listing import iter_orbs
from core.services.orb_validation import expand_orb, validate_orb

app = typer.Typer(no_args_is_help=True, help="Client for the orb registry GraphQL API.")
orb_app = typer.Typer(no_args_is_help=True, help="Operate on orbs.")
app.add_typer(orb_app, name="orb")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _fail(error: OrbCtlError) -> NoReturn:
    print_error(_err_console, str(error))
    raise typer.Exit(code=1) from error


@app.callback()
def main_callback(
    ctx: typer.Context,
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        help="GraphQL endpoint URL (overrides ORBCTL_ENDPOINT).",
    ),
    token: str | None = typer.Option(
        None,
        "--token",
        help="API token (overrides ORBCTL_TOKEN).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    overrides: dict[str, object] = {}
    if endpoint is not None:
        overrides["endpoint"] = endpoint
    if token is not None:
        overrides["token"] = token
    if verbose:
        overrides["verbose"] = True

    try:
        settings = load_settings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(settings.verbose)
    ctx.obj = settings


@orb_app.callback()
def orb_callback() -> None:
    # Query y modelos deben coincidir antes de tocar la red.
    verify_query_shapes()


@orb_app.command(name="list")
def list_orbs(ctx: typer.Context) -> None:
    """List orbs."""

    settings = context.settings_from_context(ctx)
    try:
        with context.open_transport(settings) as transport:
            for orb in iter_orbs(transport, settings.endpoint):
                typer.echo(orb.name)
    except OrbCtlError as exc:
        _fail(exc)


@orb_app.command()
def validate(
    ctx: typer.Context,
    path: Path = typer.Option(Path("orb.yml"), "--path", "-p", help="Path to orb file."),
) -> None:
    """Validate an orb.yml."""

    settings = context.settings_from_context(ctx)
    try:
        document = load_orb_document(path)
        with context.open_transport(settings) as transport:
            validate_orb(transport, document, settings.endpoint)
    except OrbCtlError as exc:
        _fail(exc)

    print_success(_console, f"Orb at {path} is valid")


@orb_app.command()
def expand(
    ctx: typer.Context,
    path: Path = typer.Option(Path("orb.yml"), "--path", "-p", help="Path to orb file."),
) -> None:
    """Expand an orb.yml."""

    settings = context.settings_from_context(ctx)
    try:
        document = load_orb_document(path)
        with context.open_transport(settings) as transport:
            expanded = expand_orb(transport, document, settings.endpoint)
    except OrbCtlError as exc:
        _fail(exc)

    typer.echo(expanded)


def run() -> None:
    app()
