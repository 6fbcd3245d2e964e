"""Chat session management for the companion chat.

Responsibilities:
    - Session resolution (reuse the current session or create one)
    - Optimistic message append and streamed reply rendering
    - Session history loading and session switching

Holds no UI code. Pages subscribe to state changes through callbacks.
"""

from eunoia.chat.session_manager import (
    AUTH_ERROR_ALERT,
    ERROR_REPLY,
    SESSION_ERROR_ALERT,
    ChatSessionManager,
)

__all__ = ["AUTH_ERROR_ALERT", "ERROR_REPLY", "SESSION_ERROR_ALERT", "ChatSessionManager"]
