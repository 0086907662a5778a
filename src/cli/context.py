"""Wiring compartido por los comandos: settings y transporte.

Los comandos acceden al transporte a través de `open_transport` (vía el
módulo, no importando el nombre) para que los tests puedan sustituirlo.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer

from adapters.http_client import GraphQLTransport
from core.config import AppSettings, load_settings
from core.interfaces.transport import QueryTransport


def settings_from_context(ctx: typer.Context) -> AppSettings:
    """Settings creados por el callback raíz; por defecto, los del entorno."""

    obj = ctx.obj
    if isinstance(obj, AppSettings):
        return obj
    settings = load_settings()
    ctx.obj = settings
    return settings


@contextmanager
def open_transport(settings: AppSettings) -> Iterator[QueryTransport]:
    with GraphQLTransport(settings) as transport:
        yield transport
