"""Planner endpoints and the derived dashboard figures."""

import asyncio
import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from eunoia.client.base import BaseApiClient, parse_model
from eunoia.client.errors import ApiError
from eunoia.models.wellness import (
    PlannerStats,
    TimetableEntry,
    TimetableEntryInput,
    Todo,
    TodoInput,
    minutes_since_midnight,
)

logger = logging.getLogger(__name__)


class TimetableConflictError(Exception):
    """Raised when a new activity overlaps one already scheduled that day."""


def compute_planner_stats(
    todos: list[Todo], timetable: Mapping[str, Sequence[object]]
) -> PlannerStats:
    """Summarize todos and the weekly timetable.

    Args:
        todos: All todos of the user.
        timetable: Activities keyed by day.

    Returns:
        Todo counts, rounded completion percentage and activity counts.
    """
    total = len(todos)
    completed = sum(1 for todo in todos if todo.completed)
    activities_by_day = {day: len(activities) for day, activities in timetable.items()}

    return PlannerStats(
        total_todos=total,
        completed_todos=completed,
        pending_todos=total - completed,
        completion_rate=math.floor(completed * 100 / total + 0.5) if total else 0,
        activities_by_day=activities_by_day,
        total_activities=sum(activities_by_day.values()),
    )


def find_overlap(
    scheduled: Iterable[TimetableEntry], entry: TimetableEntryInput
) -> TimetableEntry | None:
    """Return the first scheduled activity that shares time with ``entry``.

    Activities that merely touch (one ends when the other starts) do not
    overlap. Scheduled activities with unreadable times are skipped.
    """
    start = minutes_since_midnight(entry.start_time)
    end = minutes_since_midnight(entry.end_time)
    for existing in scheduled:
        try:
            existing_start = minutes_since_midnight(existing.start_time)
            existing_end = minutes_since_midnight(existing.end_time)
        except ValueError:
            continue
        if start < existing_end and end > existing_start:
            return existing
    return None


class PlannerApiClient(BaseApiClient):
    """Todos and the weekly timetable."""

    async def _services(self, method: str, path: str, **kwargs: Any) -> Any:
        return await self.request_json(
            method, path, base_url=self._config.services_base_url, **kwargs
        )

    async def get_todos(self) -> list[Todo]:
        data = await self._services("GET", "/todos")
        if not isinstance(data, list):
            raise ApiError("Unexpected todos payload")
        return [parse_model(Todo, item) for item in data]

    async def create_todo(self, todo: TodoInput) -> None:
        await self._services("POST", "/todos", json=todo.model_dump(mode="json"))
        logger.info(f"Created todo {todo.title!r}")

    async def set_todo_completed(self, todo_id: str, completed: bool) -> None:
        await self._services("PUT", f"/todos/{todo_id}", json={"completed": completed})

    async def delete_todo(self, todo_id: str) -> None:
        await self._services("DELETE", f"/todos/{todo_id}")
        logger.info(f"Deleted todo {todo_id}")

    async def get_week_timetable(self) -> dict[str, list[TimetableEntry]]:
        data = await self._services("GET", "/timetable/week")
        if not isinstance(data, dict):
            raise ApiError("Unexpected timetable payload")
        return {
            day: [parse_model(TimetableEntry, item) for item in activities or []]
            for day, activities in data.items()
        }

    async def add_timetable_entry(
        self, entry: TimetableEntryInput, scheduled: Iterable[TimetableEntry] = ()
    ) -> None:
        """Schedule an activity.

        Args:
            entry: The activity to add.
            scheduled: Activities already on ``entry.day``, checked for overlap
                before anything is sent.

        Raises:
            TimetableConflictError: The activity overlaps a scheduled one.
            AuthenticationRequired: Missing, expired or rejected token.
            ApiError: The backend rejected the activity.
        """
        clash = find_overlap(scheduled, entry)
        if clash is not None:
            raise TimetableConflictError("This activity overlaps with an existing one.")
        await self._services("POST", "/timetable", json=entry.model_dump())
        logger.info(f"Scheduled {entry.activity!r} on {entry.day} at {entry.start_time}")

    async def delete_timetable_entry(self, entry_id: str) -> None:
        await self._services("DELETE", f"/timetable/{entry_id}")

    async def get_stats(self) -> PlannerStats:
        """Fetch todos and timetable concurrently and summarize them.

        Raises:
            AuthenticationRequired: Missing, expired or rejected token.
            ApiError: Either request failed.
        """
        todos, timetable = await asyncio.gather(self.get_todos(), self.get_week_timetable())
        return compute_planner_stats(todos, timetable)
