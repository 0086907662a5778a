"""Wrapper de httpx + transporte GraphQL.

Por qué un wrapper:
- Estandariza timeouts, headers y autenticación para todas las queries.
- Facilita testeo: se puede sustituir el `httpx.Client` por uno con
  `httpx.MockTransport`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from core.config import AppSettings, load_settings
from core.domain.errors import TransportError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las queries se comporten igual.
    - `transport` permite inyectar un `httpx.MockTransport` en tests.
    """

    settings = settings or load_settings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.token:
        headers["Authorization"] = settings.token
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _graphql_error_messages(body: object) -> list[str]:
    if not isinstance(body, dict):
        return []
    errors = body.get("errors")
    if not isinstance(errors, list):
        return []
    out: list[str] = []
    for err in errors:
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            out.append(err["message"])
        else:
            out.append(str(err))
    return out


class GraphQLTransport:
    """Implementa `core.interfaces.transport.QueryTransport` sobre HTTP POST.

    Cada `execute` es una única petición bloqueante; no hay reintentos.
    """

    def __init__(self, settings: AppSettings | None = None, client: httpx.Client | None = None) -> None:
        self._settings = settings or load_settings()
        self._owns_client = client is None
        self._client = client or build_client(self._settings)

    def __enter__(self) -> "GraphQLTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def execute(self, query: str, variables: Mapping[str, str], endpoint: str) -> dict[str, Any]:
        logger.debug("POST %s variables=%s", endpoint, sorted(variables))
        try:
            response = self._client.post(
                endpoint,
                json={"query": query, "variables": dict(variables)},
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {endpoint} failed: {exc}") from exc

        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = None

        messages = _graphql_error_messages(body)

        if not response.is_success:
            detail = f"HTTP {response.status_code}"
            if messages:
                detail += ": " + "; ".join(messages)
            raise TransportError(f"server returned {detail}")

        if body is None:
            raise TransportError("server returned a response that is not valid JSON")
        if not isinstance(body, dict):
            raise TransportError("server returned a JSON response that is not an object")
        if messages:
            raise TransportError("graphql: " + "; ".join(messages))

        data = body.get("data")
        if not isinstance(data, dict):
            raise TransportError("server response has no data object")
        return data
