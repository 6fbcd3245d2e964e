"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - make_token: Factory for signed JWTs with a chosen expiry
    - token: A token valid for one hour
    - client_config: Client configuration pointing at the fake backend
    - credentials: In-memory credential provider holding ``token``
    - backend_state: Mutable state of the fake backend
    - backend_transport: ASGI transport serving the fake backend
"""

import time
from collections.abc import Callable

import httpx
import jwt
import pytest

from eunoia.client.config import ClientConfig
from eunoia.client.credentials import InMemoryCredentialProvider
from tests.fake_backend import BackendState, create_fake_backend

TEST_SECRET = "test-signing-secret-of-sufficient-length"


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Return a factory for HS256 tokens expiring ``expires_in`` seconds from now."""

    def _make(expires_in: int = 3600, **claims: object) -> str:
        payload = {"sub": "alice", "exp": int(time.time()) + expires_in, **claims}
        return jwt.encode(payload, TEST_SECRET, algorithm="HS256")

    return _make


@pytest.fixture
def token(make_token: Callable[..., str]) -> str:
    return make_token()


@pytest.fixture
def client_config() -> ClientConfig:
    """Configuration routing both backends to the test transport."""
    return ClientConfig(
        api_base_url="http://test",
        services_base_url="http://test/api",
        request_timeout=5.0,
    )


@pytest.fixture
def credentials(token: str) -> InMemoryCredentialProvider:
    return InMemoryCredentialProvider(token)


@pytest.fixture
def backend_state(token: str) -> BackendState:
    return BackendState(token=token)


@pytest.fixture
def backend_transport(backend_state: BackendState) -> httpx.ASGITransport:
    """Serve the fake backend in-process.

    Returns:
        Transport to pass to any API client.
    """
    return httpx.ASGITransport(app=create_fake_backend(backend_state))
