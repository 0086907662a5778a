"""Contrato del transporte de queries.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los servicios del Core reciben el transporte inyectado: en producción el
  adaptador httpx, en tests un fake con páginas guionizadas.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class QueryTransport(Protocol):
    """Contrato mínimo para ejecutar una query contra un endpoint.

    Reglas de diseño:
    - `execute` es bloqueante: una petición en vuelo como máximo.
    - Devuelve el objeto `data` ya decodificado (árbol de dicts/listas).
    - Cualquier fallo (red, HTTP, JSON, errores GraphQL) se lanza como
      `core.domain.errors.TransportError`.
    """

    def execute(self, query: str, variables: Mapping[str, str], endpoint: str) -> dict[str, Any]:
        """Ejecuta `query` con `variables` contra `endpoint`."""

        ...
