"""Pydantic models for backend payloads and client-local state.

Models:
    - Message / ChatSession: Chat history as stored by the backend
    - StreamingState: The exchange currently in flight
    - ChatRequest / StartSessionResponse: Chat wire bodies
    - JournalEntry / JournalStats: Journal payloads
    - Todo / TimetableEntry: Planner payloads
    - EmotionLog / UserOptions: Emotion log payloads
    - PlannerStats / DashboardSummary: Dashboard figures
"""

from eunoia.models.emotion import (
    DEFAULT_OPTIONS,
    EMOTION_CATEGORIES,
    EmotionLog,
    EmotionLogInput,
    OptionType,
    UserOptionInput,
    UserOptions,
)
from eunoia.models.schemas import (
    ChatRequest,
    ChatSession,
    LoginRequest,
    LoginResponse,
    Message,
    Role,
    StartSessionResponse,
    StreamingState,
)
from eunoia.models.wellness import (
    MOODS,
    WEEKDAYS,
    DailyActivity,
    DashboardSummary,
    DayCount,
    DayKey,
    JournalEntry,
    JournalEntryInput,
    JournalPage,
    JournalStats,
    MoodCount,
    PlannerStats,
    TimetableEntry,
    TimetableEntryInput,
    Todo,
    TodoInput,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "EMOTION_CATEGORIES",
    "MOODS",
    "WEEKDAYS",
    "ChatRequest",
    "ChatSession",
    "DailyActivity",
    "DashboardSummary",
    "DayCount",
    "DayKey",
    "EmotionLog",
    "EmotionLogInput",
    "JournalEntry",
    "JournalEntryInput",
    "JournalPage",
    "JournalStats",
    "LoginRequest",
    "LoginResponse",
    "Message",
    "MoodCount",
    "OptionType",
    "PlannerStats",
    "Role",
    "StartSessionResponse",
    "StreamingState",
    "TimetableEntry",
    "TimetableEntryInput",
    "Todo",
    "TodoInput",
    "UserOptionInput",
    "UserOptions",
]
