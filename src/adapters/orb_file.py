"""Carga del documento local (orb.yml).

El contenido se envía tal cual al servidor (bytes decodificados, sin
normalizar saltos de línea): no se parsea YAML aquí.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.errors import LocalIOError


def load_orb_document(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LocalIOError(f"Could not load orb file at {path}: {exc}", path) from exc
