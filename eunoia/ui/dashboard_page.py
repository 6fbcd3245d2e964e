"""NiceGUI dashboard page with journal and planner statistics."""

import logging

from nicegui import ui

from eunoia.client.errors import ApiError, AuthenticationRequired
from eunoia.client.journal import JournalApiClient
from eunoia.client.planner import PlannerApiClient
from eunoia.dashboard.summary import load_dashboard
from eunoia.models.wellness import DashboardSummary
from eunoia.ui.auth import browser_credentials, redirect_to_login, require_login
from eunoia.ui.layout import nav_bar

logger = logging.getLogger(__name__)


def render_summary(summary: DashboardSummary) -> None:
    planner = summary.planner
    with ui.row().classes("w-full gap-4"):
        for title, value in (
            ("Journal entries", summary.total_entries),
            ("Todos done", f"{planner.completed_todos}/{planner.total_todos}"),
            ("Completion", f"{planner.completion_rate}%"),
            ("Activities this week", planner.total_activities),
        ):
            with ui.card().classes("w-48"):
                ui.label(title).classes("text-sm text-gray-500")
                ui.label(str(value)).classes("text-2xl font-semibold")

    with ui.row().classes("w-full gap-8"):
        with ui.column():
            ui.label("Moods").classes("text-lg font-medium")
            for mood, count in summary.mood_breakdown.items():
                ui.label(f"{mood}: {count}")
        with ui.column():
            ui.label("Last 7 days").classes("text-lg font-medium")
            for day in summary.daily_activity:
                ui.label(f"{day.weekday} {day.day:%b %d}: {day.entries}")


@ui.page("/dashboard")
def dashboard_page() -> None:
    """Journal and planner overview."""
    credentials = browser_credentials()
    if not require_login(credentials):
        return

    nav_bar(credentials)
    content = ui.column().classes("w-full p-4 gap-6")
    with content:
        ui.spinner(size="lg")

    async def load() -> None:
        try:
            summary = await load_dashboard(
                JournalApiClient(credentials=credentials),
                PlannerApiClient(credentials=credentials),
            )
        except AuthenticationRequired:
            redirect_to_login()
            return
        except ApiError as e:
            logger.warning(f"Failed to load statistics: {e}")
            content.clear()
            with content:
                ui.label("Failed to load statistics").classes("text-red-500")
            return

        content.clear()
        with content:
            render_summary(summary)

    ui.timer(0.1, load, once=True)


@ui.page("/")
def index_page() -> None:
    ui.navigate.to("/dashboard")
