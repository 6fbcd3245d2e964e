"""Shared plumbing for the backend API clients."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from eunoia.client.config import ClientConfig, get_client_config
from eunoia.client.credentials import CredentialProvider, InMemoryCredentialProvider
from eunoia.client.errors import ApiError, AuthenticationRequired

logger = logging.getLogger(__name__)

UNAUTHORIZED_STATUSES = (401, 403)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseApiClient:
    """Base class for clients of the Eunoia backend.

    Opens a short-lived ``httpx.AsyncClient`` per call and converts every
    failure into ``ApiError``.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        credentials: CredentialProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            credentials: Token source. Defaults to an empty in-memory provider.
            transport: Optional httpx transport, used by tests.
        """
        self._config = config or get_client_config()
        self._credentials = credentials or InMemoryCredentialProvider()
        self._transport = transport

    @property
    def credentials(self) -> CredentialProvider:
        return self._credentials

    def _http(self, base_url: str | None = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url or self._config.api_base_url,
            timeout=self._config.request_timeout,
            transport=self._transport,
        )

    def auth_headers(self) -> dict[str, str]:
        """Build the Authorization header from the stored token.

        Raises:
            AuthenticationRequired: If no usable token is stored.
        """
        token = self._credentials.get_valid_token()
        if token is None:
            raise AuthenticationRequired("Missing or expired token")
        return {"Authorization": f"Bearer {token}"}

    def check_status(self, response: httpx.Response) -> None:
        """Raise for a non-success response.

        Raises:
            AuthenticationRequired: On 401/403; the stored token is cleared.
            ApiError: On any other 4xx/5xx status.
        """
        if response.status_code in UNAUTHORIZED_STATUSES:
            logger.warning(f"Backend rejected token: HTTP {response.status_code}")
            self._credentials.clear()
            raise AuthenticationRequired(
                f"HTTP {response.status_code}", status_code=response.status_code
            )
        if response.is_error:
            raise ApiError(f"HTTP {response.status_code}", status_code=response.status_code)

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        base_url: str | None = None,
        authenticated: bool = True,
        **kwargs: Any,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            base_url: Override for the configured API base URL.
            authenticated: Whether to send the bearer token.
            **kwargs: Passed through to ``httpx.AsyncClient.request``.

        Returns:
            The parsed JSON body, or None for an empty body.

        Raises:
            AuthenticationRequired: Missing, expired or rejected token.
            ApiError: Transport failure, error status or non-JSON body.
        """
        headers = dict(kwargs.pop("headers", None) or {})
        if authenticated:
            headers.update(self.auth_headers())

        async with self._http(base_url) as client:
            try:
                response = await client.request(method, path, headers=headers, **kwargs)
            except httpx.RequestError as e:
                logger.warning(f"{method} {path} failed: {e}")
                raise ApiError(f"Connection failed: {e}") from e

        self.check_status(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {path}") from e


def parse_model(model: type[ModelT], data: Any) -> ModelT:
    """Validate a response body, converting schema errors to ``ApiError``."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ApiError(f"Unexpected {model.__name__} payload: {e.error_count()} errors") from e
