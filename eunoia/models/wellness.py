"""Journal, planner and dashboard models."""

from datetime import date, datetime
from typing import Literal, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

MOODS = ("Happy", "Sad", "Excited", "Anxious", "Calm", "Angry", "Grateful", "Neutral")


class JournalEntryInput(BaseModel):
    """Payload for creating or updating a journal entry.

    Attributes:
        title: Optional entry title.
        content: Entry body.
        mood: One of ``MOODS``, or None.
        tags: Free-form tags.
    """

    title: str = ""
    content: str = Field(..., min_length=1)
    mood: str | None = None
    tags: list[str] = Field(default_factory=list)


class JournalEntry(BaseModel):
    """A stored journal entry. The backend uses Mongo-style ``_id`` keys."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str = ""
    content: str = ""
    mood: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = Field(None, alias="createdAt")

    @property
    def display_title(self) -> str:
        return self.title or "Untitled Entry"


class JournalPage(BaseModel):
    """One page of journal entries."""

    entries: list[JournalEntry] = Field(default_factory=list)
    total_pages: int = Field(1, ge=0)


class MoodCount(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mood: str = Field(..., alias="_id")
    count: int = Field(0, ge=0)


class DayKey(BaseModel):
    year: int
    month: int
    day: int

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


class DayCount(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day: DayKey = Field(..., alias="_id")
    count: int = Field(0, ge=0)


class JournalStats(BaseModel):
    """Aggregates returned by ``GET /entries/stats``."""

    total_entries: int = Field(0, ge=0)
    mood_stats: list[MoodCount] = Field(default_factory=list)
    daily_stats: list[DayCount] = Field(default_factory=list)


Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
WEEKDAYS: tuple[str, ...] = get_args(Weekday)
Priority = Literal["low", "medium", "high"]
DEFAULT_ACTIVITY_COLOR = "#3B82F6"
CLOCK_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def minutes_since_midnight(value: str) -> int:
    """Convert an ``HH:MM`` time to minutes.

    Raises:
        ValueError: If the value is not ``HH:MM``.
    """
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


class Todo(BaseModel):
    """A stored todo item."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    title: str = ""
    description: str | None = None
    priority: str | None = None
    due_date: str | None = None
    completed: bool = False


class TodoInput(BaseModel):
    """Payload for ``POST /todos``."""

    title: str = Field(..., min_length=1)
    description: str = ""
    priority: Priority = "medium"
    due_date: date | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v


class TimetableEntry(BaseModel):
    """A scheduled activity in the weekly timetable."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    day: str | None = None
    start_time: str = ""
    end_time: str = ""
    activity: str = ""
    color: str | None = None


class TimetableEntryInput(BaseModel):
    """Payload for ``POST /timetable``.

    Attributes:
        day: Lower-case weekday name.
        start_time: Start as ``HH:MM``.
        end_time: End as ``HH:MM``, strictly after ``start_time``.
        activity: What is scheduled.
        color: Display colour as a hex string.
    """

    day: Weekday
    start_time: str = Field(..., pattern=CLOCK_TIME_PATTERN)
    end_time: str = Field(..., pattern=CLOCK_TIME_PATTERN)
    activity: str = Field(..., min_length=1)
    color: str = DEFAULT_ACTIVITY_COLOR

    @field_validator("activity", mode="before")
    @classmethod
    def strip_activity(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def check_time_order(self) -> "TimetableEntryInput":
        if minutes_since_midnight(self.end_time) <= minutes_since_midnight(self.start_time):
            raise ValueError("End time must be after start time.")
        return self


class PlannerStats(BaseModel):
    """Planner figures shown on the dashboard.

    Attributes:
        total_todos: Number of todos.
        completed_todos: Todos marked completed.
        pending_todos: Todos not yet completed.
        completion_rate: Rounded percentage of completed todos.
        activities_by_day: Scheduled activity count per weekday.
        total_activities: Activities across the whole week.
    """

    total_todos: int = 0
    completed_todos: int = 0
    pending_todos: int = 0
    completion_rate: int = Field(0, ge=0, le=100)
    activities_by_day: dict[str, int] = Field(default_factory=dict)
    total_activities: int = 0


class DailyActivity(BaseModel):
    day: date
    weekday: str
    entries: int = 0


class DashboardSummary(BaseModel):
    """Everything the dashboard page renders."""

    total_entries: int = 0
    mood_breakdown: dict[str, int] = Field(default_factory=dict)
    daily_activity: list[DailyActivity] = Field(default_factory=list)
    planner: PlannerStats = Field(default_factory=PlannerStats)
