"""Chat session state and the streamed exchange with the backend.

``ChatSessionManager`` owns everything the chat page shows: the loaded
session history, the visible messages and the in-flight reply. The page
subscribes through three callbacks and never talks to the API directly.

Flow of one send:

1. Resolve a session, creating one on the backend if none is current.
2. Append the user message and an empty assistant message.
3. Grow the assistant message as ``data:`` lines arrive.
4. Reload history. Local messages are provisional until that reload
   succeeds; after a completed reply they are replaced by the server copy.

Only one exchange runs at a time. A send while one is in flight is dropped,
not queued.
"""

import logging
from collections.abc import Callable

from eunoia.client.chat import ChatApiClient
from eunoia.client.errors import ApiError, AuthenticationRequired
from eunoia.models.schemas import ChatSession, Message, Role, StreamingState

logger = logging.getLogger(__name__)

ERROR_REPLY = "Sorry, I encountered an error. Please try again."
AUTH_ERROR_ALERT = "Authentication error. Please log in again."
SESSION_ERROR_ALERT = "Could not start a new chat session. Please try again."


def _noop(*_args: object) -> None:
    pass


class ChatSessionManager:
    """Client-side chat state for one page.

    Attributes:
        messages: Messages currently shown, in conversation order.
        history: Sessions from the last history load, in backend order.
        session_id: Session new messages are sent to, or None.
        selected_session_id: Session highlighted in the sidebar, or None.
        streaming: State of the exchange in flight.
        loading_history: True while a history load is outstanding.
    """

    def __init__(
        self,
        api: ChatApiClient,
        on_update: Callable[[], None] | None = None,
        on_alert: Callable[[str], None] | None = None,
        on_auth_required: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            api: Client for the chat endpoints.
            on_update: Called whenever visible state changes.
            on_alert: Called with a user-facing message on send failures.
            on_auth_required: Called when the user has to log in again.
        """
        self._api = api
        self._on_update = on_update or _noop
        self._on_alert = on_alert or _noop
        self._on_auth_required = on_auth_required or _noop

        self.messages: list[Message] = []
        self.history: list[ChatSession] = []
        self.session_id: str | None = None
        self.selected_session_id: str | None = None
        self.streaming = StreamingState()
        self.loading_history = False

    @property
    def is_streaming(self) -> bool:
        return self.streaming.active

    def streaming_reply(self) -> Message | None:
        """Return the assistant message currently being streamed, if any."""
        index = self.streaming.message_index
        if not self.streaming.active or index is None or index >= len(self.messages):
            return None
        return self.messages[index]

    def find_session(self, session_id: str) -> ChatSession | None:
        return next((s for s in self.history if s.session_id == session_id), None)

    async def load_history(self) -> list[ChatSession]:
        """Reload the session list from the backend.

        Never raises. Any failure leaves the history empty.

        Returns:
            The loaded sessions in backend order.
        """
        self.loading_history = True
        self._on_update()
        try:
            self.history = await self._api.get_history()
        except AuthenticationRequired:
            self.history = []
            self._on_auth_required()
        except ApiError as e:
            logger.warning(f"Failed to load chat history: {e}")
            self.history = []
        finally:
            self.loading_history = False

        logger.debug(f"Loaded {len(self.history)} chat sessions")
        self._on_update()
        return self.history

    async def ensure_session(self) -> str:
        """Return the current session id, creating a session if there is none.

        A created session becomes both current and selected, and history is
        reloaded so it shows up in the sidebar.

        Raises:
            AuthenticationRequired: Missing, expired or rejected token.
            ApiError: The backend could not create a session.
        """
        if self.session_id:
            return self.session_id

        session_id = await self._api.start_session()
        self.session_id = session_id
        self.selected_session_id = session_id
        await self.load_history()
        return session_id

    async def start_new_session(self) -> bool:
        """Create a fresh session on the backend and switch to it.

        Returns:
            False if ignored because a reply is streaming or creation failed.
        """
        if self.is_streaming:
            logger.debug("Ignoring new session request while streaming")
            return False

        try:
            session_id = await self._api.start_session()
        except AuthenticationRequired:
            self._require_login()
            return False
        except ApiError as e:
            logger.warning(f"Could not start chat session: {e}")
            self._on_alert(SESSION_ERROR_ALERT)
            return False

        self.session_id = session_id
        self.selected_session_id = session_id
        self.messages = []
        self._on_update()
        await self.load_history()
        return True

    def select_session(self, session_id: str | None) -> bool:
        """Switch the visible conversation.

        ``None`` starts fresh: the next send creates a session. An id that is
        not in the loaded history leaves the view empty.

        Returns:
            False if ignored because a reply is streaming.
        """
        if self.is_streaming:
            logger.debug("Ignoring session selection while streaming")
            return False

        self.selected_session_id = session_id
        self.session_id = session_id
        if session_id is None:
            self.messages = []
        else:
            session = self.find_session(session_id)
            if session is None:
                # TODO: confirm with product whether a stale id should surface an error
                logger.info(f"Selected session {session_id} is not in loaded history")
            self.messages = [
                Message(sender=m.sender, text=m.text) for m in (session.messages if session else [])
            ]
        self._on_update()
        return True

    async def send_message(self, text: str) -> bool:
        """Send a user message and stream the assistant reply into view.

        Args:
            text: Raw input. Surrounding whitespace is stripped.

        Returns:
            False if the send was dropped or aborted before any message was
            appended, True once the exchange has run (even if it failed).
        """
        text = text.strip()
        if not text or self.is_streaming:
            logger.debug("Dropping send: empty input or reply in progress")
            return False

        try:
            self._api.auth_headers()
        except AuthenticationRequired:
            self._require_login()
            return False

        self.streaming.active = True
        self._on_update()
        try:
            session_id = await self.ensure_session()
        except AuthenticationRequired:
            self.streaming.reset()
            self._on_update()
            self._require_login()
            return False
        except ApiError as e:
            logger.warning(f"Could not start chat session: {e}")
            self.streaming.reset()
            self._on_alert(SESSION_ERROR_ALERT)
            self._on_update()
            return False

        self.messages.append(Message(sender=Role.USER, text=text))
        self.messages.append(Message(sender=Role.ASSISTANT, text=""))
        self.streaming.session_id = session_id
        self.streaming.message_index = len(self.messages) - 1
        self._on_update()

        completed = False
        auth_failed = False
        try:
            async for piece in self._api.stream_chat(text, session_id):
                self.streaming.buffer += piece
                self._set_reply(self.streaming.buffer)
            completed = True
        except AuthenticationRequired:
            auth_failed = True
            self._set_reply(ERROR_REPLY)
        except ApiError as e:
            logger.warning(f"Chat exchange in session {session_id} failed: {e}")
            self._set_reply(ERROR_REPLY)
        finally:
            self.streaming.reset()

        if auth_failed:
            self._on_update()
            self._require_login()
            return True

        await self.load_history()
        if completed:
            self._reconcile(session_id)
        self._on_update()
        return True

    def _set_reply(self, text: str) -> None:
        index = self.streaming.message_index
        if index is None:
            return
        self.messages[index] = Message(sender=Role.ASSISTANT, text=text)
        self._on_update()

    def _reconcile(self, session_id: str) -> None:
        """Replace provisional messages with the server copy, when there is one."""
        if self.session_id != session_id:
            return
        session = self.find_session(session_id)
        if session is None or not session.messages:
            logger.debug(f"Keeping local messages for session {session_id}")
            return
        self.messages = list(session.messages)

    def _require_login(self) -> None:
        self._on_alert(AUTH_ERROR_ALERT)
        self._on_auth_required()
