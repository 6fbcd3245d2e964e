"""Dashboard figures built from journal and planner statistics."""

import asyncio
import logging
from datetime import date, timedelta

from eunoia.client.journal import JournalApiClient
from eunoia.client.planner import PlannerApiClient
from eunoia.models.wellness import (
    MOODS,
    DailyActivity,
    DashboardSummary,
    JournalStats,
    PlannerStats,
)

logger = logging.getLogger(__name__)

ACTIVITY_DAYS = 7


def build_mood_breakdown(stats: JournalStats) -> dict[str, int]:
    """Count entries per mood, listing every known mood even when unused."""
    counts = {item.mood: item.count for item in stats.mood_stats}
    return {mood: counts.get(mood, 0) for mood in MOODS}


def build_daily_activity(stats: JournalStats, today: date) -> list[DailyActivity]:
    """Entry counts for the last week, oldest day first, ending with ``today``."""
    counts = {item.day.as_date(): item.count for item in stats.daily_stats}
    days = [today - timedelta(days=offset) for offset in range(ACTIVITY_DAYS - 1, -1, -1)]
    return [
        DailyActivity(day=day, weekday=day.strftime("%a"), entries=counts.get(day, 0))
        for day in days
    ]


def build_summary(
    journal_stats: JournalStats, planner_stats: PlannerStats, today: date
) -> DashboardSummary:
    return DashboardSummary(
        total_entries=journal_stats.total_entries,
        mood_breakdown=build_mood_breakdown(journal_stats),
        daily_activity=build_daily_activity(journal_stats, today),
        planner=planner_stats,
    )


async def load_dashboard(
    journal: JournalApiClient,
    planner: PlannerApiClient,
    today: date | None = None,
) -> DashboardSummary:
    """Fetch journal and planner statistics concurrently and combine them.

    Args:
        journal: Journal client.
        planner: Planner client.
        today: Last day of the activity window. Defaults to the local date.

    Returns:
        The combined dashboard summary.

    Raises:
        AuthenticationRequired: Missing, expired or rejected token.
        ApiError: Either backend call failed.
    """
    journal_stats, planner_stats = await asyncio.gather(
        journal.get_stats(), planner.get_stats()
    )
    summary = build_summary(journal_stats, planner_stats, today or date.today())
    logger.debug(f"Dashboard loaded: {summary.total_entries} journal entries")
    return summary
