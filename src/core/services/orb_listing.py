"""Paginación de la colección de orbs.

El motor reenvía el cursor del último edge recibido como `after` de la
siguiente petición hasta que el servidor indica `hasNextPage = false`.
Es un generador: los orbs se emiten a medida que llega cada página y
nunca hay más de una petición en vuelo.
"""

from __future__ import annotations

import logging
from typing import Iterator

from core.domain.errors import ResponseShapeError, TransportError
from core.domain.models import ListOrbsResponse, Orb
from core.interfaces.transport import QueryTransport
from core.queries import LIST_ORBS_QUERY
from core.response_mapper import decode

logger = logging.getLogger(__name__)


def iter_orbs(transport: QueryTransport, endpoint: str) -> Iterator[Orb]:
    """Recorre todas las páginas de orbs en el orden del servidor.

    Cada llamada empieza desde el principio de la colección. Un fallo en
    cualquier página termina la secuencia con `TransportError`; lo ya
    emitido sigue siendo válido para el caller.
    """

    cursor = ""
    page_number = 0

    while True:
        page_number += 1
        try:
            payload = transport.execute(LIST_ORBS_QUERY, {"after": cursor}, endpoint)
            response = decode(ListOrbsResponse, payload, operation="ListOrbs")
        except ResponseShapeError as exc:
            raise ResponseShapeError(f"Unable to list orbs: {exc}") from exc
        except TransportError as exc:
            raise TransportError(f"Unable to list orbs: {exc}") from exc

        page = response.orbs
        # Una página vacía conserva el cursor anterior.
        for edge in page.edges:
            cursor = edge.cursor
            yield edge.node

        logger.debug(
            "orbs page %d: %d edge(s), totalCount=%d, hasNextPage=%s, cursor=%r",
            page_number,
            len(page.edges),
            page.total_count,
            page.page_info.has_next_page,
            cursor,
        )

        if not page.page_info.has_next_page:
            return
