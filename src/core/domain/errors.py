"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI necesita distinguir "el orb es inválido" de "la petición no se pudo
  completar" sin inspeccionar mensajes.
- Todo lo que hereda de `OrbCtlError` se presenta como error limpio (exit 1);
  lo demás es un bug y se deja propagar.
"""

from __future__ import annotations

from pathlib import Path


class OrbCtlError(Exception):
    """Base de los errores reportables al usuario."""


class TransportError(OrbCtlError):
    """Fallo de red, de protocolo o de decodificación al hablar con el endpoint."""


class ResponseShapeError(TransportError):
    """La respuesta decodificada no tiene la forma que espera la query."""


class ValidationFailure(OrbCtlError):
    """El servicio reportó `valid == false` para el documento enviado.

    `str(exc)` es exactamente el texto agregado de errores; `errors` conserva
    los mensajes individuales en el orden recibido.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class LocalIOError(OrbCtlError):
    """No se pudo leer el documento local."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class QueryShapeError(RuntimeError):
    """La selección de una query no cubre los campos de su modelo de respuesta.

    Es un error de programación, no un error de usuario.
    """
