"""Validación y expansión remota de un orb.

`validate_orb` y `expand_orb` comparten exactamente la misma petición
(`ValidateOrb` con el documento en la variable `orb`); solo difieren en qué
hacen con un resultado válido.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.domain.errors import ResponseShapeError, TransportError, ValidationFailure
from core.domain.models import OrbConfig, ValidateOrbResponse
from core.interfaces.transport import QueryTransport
from core.queries import VALIDATE_ORB_QUERY
from core.response_mapper import decode

logger = logging.getLogger(__name__)


def format_validation_errors(messages: Iterable[str]) -> str:
    """Agrega los mensajes en un único texto multilínea.

    Formato: línea en blanco inicial y una línea `-- <mensaje>,` por error.
    Sin mensajes el resultado es `"\\n"`.
    """

    return "\n" + "".join(f"-- {message},\n" for message in messages)


def request_orb_config(transport: QueryTransport, document: str, endpoint: str) -> OrbConfig:
    """Envía el documento a validar y decodifica el `orbConfig` devuelto."""

    logger.debug("submitting orb document (%d chars) to %s", len(document), endpoint)
    try:
        payload = transport.execute(VALIDATE_ORB_QUERY, {"orb": document}, endpoint)
        response = decode(ValidateOrbResponse, payload, operation="ValidateOrb")
    except ResponseShapeError as exc:
        raise ResponseShapeError(f"Unable to validate orb: {exc}") from exc
    except TransportError as exc:
        raise TransportError(f"Unable to validate orb: {exc}") from exc
    return response.orb_config


def _raise_if_invalid(config: OrbConfig) -> None:
    if config.valid:
        return
    messages = config.messages
    # valid == false sin errores: se mantiene como fallo (cuerpo vacío).
    raise ValidationFailure(format_validation_errors(messages), messages)


def validate_orb(transport: QueryTransport, document: str, endpoint: str) -> OrbConfig:
    """Valida el documento; lanza `ValidationFailure` si el servidor lo rechaza."""

    config = request_orb_config(transport, document, endpoint)
    _raise_if_invalid(config)
    return config


def expand_orb(transport: QueryTransport, document: str, endpoint: str) -> str:
    """Devuelve el documento expandido por el servidor."""

    config = request_orb_config(transport, document, endpoint)
    _raise_if_invalid(config)
    return config.output_yaml or ""
