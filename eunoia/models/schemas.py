from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

PREVIEW_LENGTH = 50
DEFAULT_PREVIEW = "Chat Session"


class Role(str, Enum):
    """Sender of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message.

    Messages are frozen. The one assistant reply that is still streaming is
    updated by swapping in a new instance at its position in the list.

    Attributes:
        sender: Who wrote the message.
        text: The message text.
    """

    model_config = ConfigDict(frozen=True)

    sender: Role
    text: str = ""

    @field_validator("sender", mode="before")
    @classmethod
    def normalize_sender(cls, v: object) -> object:
        """Accept the backend's ``bot`` label for assistant messages."""
        if isinstance(v, str) and v.lower() == "bot":
            return Role.ASSISTANT
        return v


class ChatSession(BaseModel):
    """A conversation as stored by the backend.

    Attributes:
        session_id: Server-issued identifier.
        messages: Stored messages in conversation order.
        first_user_message: Opening user message, used for the sidebar preview.
    """

    session_id: str
    messages: list[Message] = Field(default_factory=list)
    first_user_message: str | None = None

    @property
    def preview(self) -> str:
        text = self.first_user_message
        if not text:
            return DEFAULT_PREVIEW
        if len(text) > PREVIEW_LENGTH:
            return text[:PREVIEW_LENGTH] + "..."
        return text


class StreamingState(BaseModel):
    """Client-local state of the exchange currently in flight.

    Attributes:
        active: Whether a send is in progress (the single in-flight latch).
        buffer: Text received so far for the in-progress assistant reply.
        session_id: Session the in-flight reply belongs to.
        message_index: Position of the in-progress assistant message.
    """

    active: bool = False
    buffer: str = ""
    session_id: str | None = None
    message_index: int | None = None

    def reset(self) -> None:
        self.active = False
        self.buffer = ""
        self.session_id = None
        self.message_index = None


class ChatRequest(BaseModel):
    """Request body for ``POST /chat``."""

    message: str = Field(..., min_length=1)
    session_id: str

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class StartSessionResponse(BaseModel):
    """Body returned by ``POST /start_session``."""

    session_id: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    """Body returned by ``POST /login``. Exactly one field is normally set."""

    token: str | None = None
    error: str | None = None
