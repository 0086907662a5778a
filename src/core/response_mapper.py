"""Decodificación de payloads GraphQL a modelos tipados.

Puramente estructural: no hay lógica de negocio aquí.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.domain.errors import ResponseShapeError

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode(model: type[ModelT], payload: Any, *, operation: str) -> ModelT:
    """Valida `payload` contra `model`.

    Un payload que no encaja se reporta como `ResponseShapeError` con el
    nombre de la operación, para que el caller pueda añadir contexto.
    """

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ResponseShapeError(
            f"malformed {operation} response ({exc.error_count()} problem(s)): "
            + "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in exc.errors()
            )
        ) from exc
