"""Fixtures for HTTP-level tests with mocked services."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from marketplace.core.context import get_request_context
from marketplace.main import app


@pytest.fixture
def test_client():
    """Client without lifespan; every dependency a test needs is overridden."""
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def as_user():
    """Authenticate requests as the given context."""

    def _as(ctx):
        app.dependency_overrides[get_request_context] = lambda: ctx

    return _as


@pytest.fixture
def override():
    """Replace a service dependency with an AsyncMock and return the mock."""

    def _override(dependency):
        mock = AsyncMock()
        app.dependency_overrides[dependency] = lambda: mock
        return mock

    return _override


@pytest.fixture
def now():
    return datetime.now(UTC).replace(tzinfo=None)
