"""Chat endpoints: session creation, history and the streamed reply."""

import logging
from collections.abc import AsyncGenerator

import httpx

from eunoia.client.base import BaseApiClient, parse_model
from eunoia.client.errors import ApiError
from eunoia.models.schemas import ChatRequest, ChatSession, StartSessionResponse

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
LINE_SEPARATOR = "\n"


def extract_data_payload(line: str) -> str | None:
    """Return the payload of a ``data: `` line, or None for any other line.

    Lines without the prefix are keep-alives or framing noise.
    """
    if not line.startswith(DATA_PREFIX):
        return None
    return line[len(DATA_PREFIX):]


class ChatApiClient(BaseApiClient):
    """Client for the chat session and completion endpoints."""

    async def start_session(self) -> str:
        """Create a new chat session.

        Returns:
            The server-issued session identifier.

        Raises:
            AuthenticationRequired: Missing, expired or rejected token.
            ApiError: The session could not be created.
        """
        data = await self.request_json("POST", "/start_session")
        session = parse_model(StartSessionResponse, data)
        logger.info(f"Started chat session {session.session_id}")
        return session.session_id

    async def get_history(self) -> list[ChatSession]:
        """Fetch every session of the current user, in backend order.

        A body that is not a list is treated as no history.

        Raises:
            AuthenticationRequired: Missing, expired or rejected token.
            ApiError: Transport failure, error status or malformed session.
        """
        data = await self.request_json("GET", "/history")
        if not isinstance(data, list):
            logger.warning(f"Unexpected history payload type: {type(data).__name__}")
            return []
        return [parse_model(ChatSession, item) for item in data]

    async def stream_chat(self, message: str, session_id: str) -> AsyncGenerator[str]:
        """Post a message and yield reply pieces as their lines arrive.

        The decoded body is split on ``\\n`` only, so carriage returns and
        Unicode line separators stay inside a payload. Each ``data: `` line
        yields its payload in arrival order; a final line without a trailing
        newline is flushed when the stream ends. Other lines are skipped.

        Args:
            message: The user's message.
            session_id: Session the message belongs to.

        Yields:
            Reply text pieces.

        Raises:
            AuthenticationRequired: Missing, expired or rejected token.
            ApiError: The request failed or the stream broke mid-flight.
        """
        headers = self.auth_headers()
        body = ChatRequest(message=message, session_id=session_id)

        async with self._http() as client:
            try:
                async with client.stream(
                    "POST",
                    "/chat",
                    json=body.model_dump(),
                    headers={**headers, "Accept": "text/event-stream"},
                ) as response:
                    self.check_status(response)
                    pending = ""
                    async for chunk in response.aiter_text():
                        pending += chunk
                        *lines, pending = pending.split(LINE_SEPARATOR)
                        for line in lines:
                            payload = extract_data_payload(line)
                            if payload is not None:
                                yield payload
                    payload = extract_data_payload(pending)
                    if payload is not None:
                        yield payload
            except httpx.HTTPError as e:
                logger.warning(f"Chat stream for session {session_id} failed: {e}")
                raise ApiError(f"Chat stream failed: {e}") from e
