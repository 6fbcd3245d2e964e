"""Emotion log models and the built-in choices offered when logging."""

from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

EMOTION_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Joy": (
        "Excited", "Content", "Proud", "Peaceful", "Amused", "Playful", "Grateful",
        "Optimistic", "Inspired",
    ),
    "Loved / Connected": (
        "Affectionate", "Loved", "Adored", "Romantic", "Tender", "Warm", "Cared for",
        "Friendly", "Kind", "Appreciated",
    ),
    "Calm / At Ease": ("Relaxed", "Comfortable", "Free", "Peaceful", "Serene", "Safe", "Secure"),
    "Thoughtful / Reflective": (
        "Curious", "Pensive", "Nostalgic", "Sentimental", "Wondering", "Aware",
    ),
    "Sad / Down": (
        "Sad", "Lonely", "Heartbroken", "Disappointed", "Depressed", "Resigned", "Left out",
        "Empty", "Tired",
    ),
    "Anxious / Worried": (
        "Nervous", "Stressed", "Anxious", "Overwhelmed", "Fearful", "Insecure", "Doubtful",
        "Vulnerable", "Cautious",
    ),
    "Angry / Frustrated": (
        "Angry", "Annoyed", "Bitter", "Frustrated", "Resentful", "Offended", "Impatient",
        "Envious", "Hateful",
    ),
    "Afraid / Scared": ("Scared", "Terrified", "Horrified", "Panicked", "Paranoid", "Unsafe"),
    "Confused / Lost": (
        "Confused", "Lost", "Baffled", "Distracted", "Skeptical", "Shocked", "Reluctant",
    ),
    "Desire / Passionate": ("Desire", "Lust", "Sexy", "Craving", "Lovesick"),
    "Motivated / Driven": ("Determined", "Hopeful", "Focused", "Courageous", "Eager"),
}

OptionType = Literal["location", "company", "activity"]

DEFAULT_OPTIONS: dict[str, tuple[str, ...]] = {
    "location": ("Home", "Work", "Outside"),
    "company": ("Friends", "Family", "Alone"),
    "activity": ("Working", "Exercising", "Socializing", "Relaxing", "Eating", "Traveling"),
}


class EmotionLogInput(BaseModel):
    """Payload for ``POST /emotion``.

    Attributes:
        mood: The felt emotion, usually one of ``EMOTION_CATEGORIES``.
        note: Free-form note.
        intensity: Strength from 1 (low) to 10 (high).
        location: Where the user was.
        company: Who the user was with.
        activity: What the user was doing.
    """

    mood: str = Field(..., min_length=1)
    note: str = ""
    intensity: int = Field(5, ge=1, le=10)
    location: str = ""
    company: str = ""
    activity: str = ""


class EmotionLog(BaseModel):
    """A stored emotion log entry."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    mood: str
    note: str | None = None
    intensity: int | None = None
    location: str | None = None
    company: str | None = None
    activity: str | None = None
    timestamp: datetime | None = None

    @property
    def context(self) -> list[str]:
        """Location, company and activity, skipping the unset ones."""
        return [value for value in (self.location, self.company, self.activity) if value]


class UserOptions(BaseModel):
    """Custom choices the user added on top of ``DEFAULT_OPTIONS``."""

    locations: list[str] = Field(default_factory=list)
    companies: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)

    @field_validator("locations", "companies", "activities", mode="before")
    @classmethod
    def ignore_non_list(cls, v: object) -> object:
        """The backend may send null or garbage for a list it has never stored."""
        return v if isinstance(v, list) else []

    def choices(self, option_type: OptionType) -> list[str]:
        """Built-in choices followed by the user's own, without duplicates."""
        custom = {
            "location": self.locations,
            "company": self.companies,
            "activity": self.activities,
        }[option_type]
        return list(dict.fromkeys([*DEFAULT_OPTIONS[option_type], *custom]))


class UserOptionInput(BaseModel):
    """Payload for ``POST /user-options``."""

    type: OptionType
    value: str = Field(..., min_length=1)

    @field_validator("value", mode="before")
    @classmethod
    def strip_value(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v
