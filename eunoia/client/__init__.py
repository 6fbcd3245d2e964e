"""Async HTTP clients for the Eunoia backend.

Responsibilities:
    - Bearer token handling through an injectable credential provider
    - Chat sessions, history and the streamed chat reply
    - Journal entries and statistics
    - Planner todos and timetable
    - Emotion logs and custom logging choices
    - Username/password login

Every failure surfaces as ``ApiError``. Missing, expired or rejected tokens
surface as ``AuthenticationRequired``; navigation is left to the caller.
"""

from eunoia.client.auth import AuthApiClient
from eunoia.client.chat import ChatApiClient, extract_data_payload
from eunoia.client.config import ClientConfig, get_client_config
from eunoia.client.credentials import (
    CredentialProvider,
    InMemoryCredentialProvider,
    StorageCredentialProvider,
    is_token_expired,
)
from eunoia.client.emotion import EmotionApiClient
from eunoia.client.errors import ApiError, AuthenticationRequired, LoginError
from eunoia.client.journal import JournalApiClient, parse_tags
from eunoia.client.planner import (
    PlannerApiClient,
    TimetableConflictError,
    compute_planner_stats,
    find_overlap,
)

__all__ = [
    "ApiError",
    "AuthApiClient",
    "AuthenticationRequired",
    "ChatApiClient",
    "ClientConfig",
    "CredentialProvider",
    "EmotionApiClient",
    "InMemoryCredentialProvider",
    "JournalApiClient",
    "LoginError",
    "PlannerApiClient",
    "StorageCredentialProvider",
    "TimetableConflictError",
    "compute_planner_stats",
    "extract_data_payload",
    "find_overlap",
    "get_client_config",
    "is_token_expired",
    "parse_tags",
]
