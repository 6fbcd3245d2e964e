"""Username/password login against the backend."""

import logging

import httpx

from eunoia.client.base import BaseApiClient, parse_model
from eunoia.client.errors import ApiError, LoginError
from eunoia.models.schemas import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_ERROR = "Login failed"


class AuthApiClient(BaseApiClient):
    """Obtains a bearer token and hands it to the credential provider."""

    async def login(self, username: str, password: str) -> str:
        """Log in and store the issued token.

        Args:
            username: Account name.
            password: Account password.

        Returns:
            The issued token.

        Raises:
            LoginError: The backend rejected the credentials or was unreachable.
        """
        body = LoginRequest(username=username, password=password)
        async with self._http() as client:
            try:
                response = await client.post("/login", json=body.model_dump())
            except httpx.RequestError as e:
                raise LoginError(f"Connection failed: {e}") from e

        try:
            result = parse_model(LoginResponse, response.json())
        except (ValueError, ApiError):
            result = LoginResponse()

        if response.is_error or not result.token:
            logger.info(f"Login rejected for {username!r}: HTTP {response.status_code}")
            raise LoginError(result.error or DEFAULT_LOGIN_ERROR, status_code=response.status_code)

        self._credentials.set_token(result.token)
        logger.info(f"Logged in as {username!r}")
        return result.token

    def logout(self) -> None:
        self._credentials.clear()
