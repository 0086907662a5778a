"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ENDPOINT = "https://circleci.com/graphql-unstable"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "orbctl"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "orbctl"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "orbctl"
    return Path.home() / ".config" / "orbctl"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Los valores `None` se ignoran: no borran una clave existente. Los valores
    se escriben siempre entre comillas para que tokens con `#`, espacios o
    comillas se lean igual.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text("# orbctl user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="always")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / .env) sin ensuciar el Core.
    - Un único contrato de configuración para CLI y adaptadores.

    La instancia se construye una vez por invocación en la CLI (ver
    `load_settings`) y se pasa explícitamente hacia abajo; no hay estado
    global mutable.
    """

    model_config = SettingsConfigDict(
        env_prefix="ORBCTL_",
        extra="ignore",
        case_sensitive=False,
        # El .env de usuario se añade en `load_settings`.
        env_file=".env",
        env_file_encoding="utf-8",
    )

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        min_length=1,
        description="URL del endpoint GraphQL del servicio de configuración.",
    )
    token: str | None = Field(
        default=None,
        description="Token de API enviado en la cabecera Authorization (opcional).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="orbctl/0.1",
        min_length=1,
        description="User-Agent para las peticiones al endpoint.",
    )
    verbose: bool = Field(
        default=False,
        description="Activa logging de depuración (requests y páginas).",
    )


def load_settings(**overrides: object) -> AppSettings:
    """Construye `AppSettings` leyendo `.env` del proyecto y el del usuario.

    La ruta del .env de usuario se resuelve en cada llamada (respeta
    `XDG_CONFIG_HOME`/`APPDATA` actuales). Orden: proyecto primero, luego
    usuario; los `overrides` (flags de la CLI) ganan a ambos.
    """

    return AppSettings(_env_file=(".env", get_user_env_file()), **overrides)
