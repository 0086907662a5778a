"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Cada query GraphQL tiene una estructura de respuesta tipada; decodificar
  con `model_validate` detecta respuestas malformadas en el borde.
- Los alias camelCase reflejan los nombres de campo de la query, así
  `core.queries` puede comprobar que query y modelo coinciden.

Nota:
- Los modelos son inmutables (frozen): cada request produce resultados
  independientes, sin estado compartido.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


_MODEL_CONFIG = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Orb(BaseModel):
    """Recurso remoto con nombre. La identidad es el nombre."""

    model_config = _MODEL_CONFIG

    name: str = Field(
        ...,
        description="Nombre del orb (p.ej. 'circleci/node').",
    )


class OrbEdge(BaseModel):
    model_config = _MODEL_CONFIG

    cursor: str = Field(
        ...,
        description="Cursor opaco de esta posición; se reenvía tal cual.",
    )
    node: Orb


class PageInfo(BaseModel):
    model_config = _MODEL_CONFIG

    has_next_page: bool = Field(
        ...,
        alias="hasNextPage",
        description="El servidor tiene más páginas después de esta.",
    )


class OrbPage(BaseModel):
    """Una página de la colección: pares (cursor, orb) + `hasNextPage`."""

    model_config = _MODEL_CONFIG

    total_count: int = Field(
        default=0,
        alias="totalCount",
        description="Tamaño total de la colección según el servidor.",
    )
    edges: list[OrbEdge] = Field(default_factory=list)
    page_info: PageInfo = Field(..., alias="pageInfo")


class ListOrbsResponse(BaseModel):
    model_config = _MODEL_CONFIG

    orbs: OrbPage


class OrbConfigError(BaseModel):
    model_config = _MODEL_CONFIG

    message: str = Field(
        ...,
        description="Descripción legible de un fallo de validación.",
    )


class OrbConfig(BaseModel):
    """Resultado de validar/expandir un documento.

    El servidor garantiza que `errors` solo trae elementos cuando `valid` es
    falso; el cliente no lo verifica.
    """

    model_config = _MODEL_CONFIG

    valid: bool
    errors: list[OrbConfigError] | None = Field(default=None)
    source_yaml: str | None = Field(
        default=None,
        alias="sourceYaml",
        description="Documento tal como lo recibió el servidor.",
    )
    output_yaml: str | None = Field(
        default=None,
        alias="outputYaml",
        description="Documento expandido (sin referencias).",
    )

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors or []]


class ValidateOrbResponse(BaseModel):
    model_config = _MODEL_CONFIG

    orb_config: OrbConfig = Field(..., alias="orbConfig")
