"""Dashboard summary combining journal and planner statistics."""

from eunoia.dashboard.summary import (
    build_daily_activity,
    build_mood_breakdown,
    build_summary,
    load_dashboard,
)

__all__ = ["build_daily_activity", "build_mood_breakdown", "build_summary", "load_dashboard"]
