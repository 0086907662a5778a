from __future__ import annotations

import pytest

from core.domain.errors import TransportError


@pytest.fixture
def endpoint() -> str:
    return "https://registry.test/graphql"


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError("connection refused")
