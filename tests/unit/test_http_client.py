from __future__ import annotations

import json

import httpx
import pytest

from adapters.http_client import GraphQLTransport, build_client
from core.config import AppSettings
from core.domain.errors import TransportError
from core.interfaces.transport import QueryTransport

ENDPOINT = "https://registry.test/graphql"


def _transport(handler, **settings) -> GraphQLTransport:
    app_settings = AppSettings(_env_file=None, **settings)
    client = build_client(app_settings, transport=httpx.MockTransport(handler))
    return GraphQLTransport(app_settings, client=client)


def test_implements_query_transport_protocol() -> None:
    assert isinstance(_transport(lambda request: httpx.Response(200, json={"data": {}})), QueryTransport)


def test_posts_query_and_variables_and_returns_data() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": {"orbs": {"totalCount": 0}}})

    data = _transport(handler, token="secret").execute("query Q { x }", {"after": "c1"}, ENDPOINT)

    assert data == {"orbs": {"totalCount": 0}}
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == ENDPOINT
    assert json.loads(request.content) == {"query": "query Q { x }", "variables": {"after": "c1"}}
    assert request.headers["Authorization"] == "secret"
    assert request.headers["Accept"] == "application/json"


def test_no_authorization_header_without_token() -> None:
    client = build_client(AppSettings(_env_file=None, token=None))
    try:
        assert "Authorization" not in client.headers
    finally:
        client.close()


def test_graphql_errors_become_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": None, "errors": [{"message": "boom"}, {"message": "bang"}]})

    with pytest.raises(TransportError, match="graphql: boom; bang"):
        _transport(handler).execute("query Q { x }", {}, ENDPOINT)


def test_http_status_error_includes_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with pytest.raises(TransportError, match="HTTP 503"):
        _transport(handler).execute("query Q { x }", {}, ENDPOINT)


def test_invalid_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>nope</html>")

    with pytest.raises(TransportError, match="not valid JSON"):
        _transport(handler).execute("query Q { x }", {}, ENDPOINT)


def test_missing_data_object() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": None})

    with pytest.raises(TransportError, match="no data object"):
        _transport(handler).execute("query Q { x }", {}, ENDPOINT)


def test_network_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError, match="connection refused") as excinfo:
        _transport(handler).execute("query Q { x }", {}, ENDPOINT)

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
