"""NiceGUI planner page: todos and the weekly timetable."""

import logging

from nicegui import ui
from pydantic import ValidationError

from eunoia.client.errors import ApiError, AuthenticationRequired
from eunoia.client.planner import PlannerApiClient, TimetableConflictError
from eunoia.models.wellness import (
    DEFAULT_ACTIVITY_COLOR,
    WEEKDAYS,
    TimetableEntry,
    TimetableEntryInput,
    Todo,
    TodoInput,
)
from eunoia.ui.auth import browser_credentials, redirect_to_login, require_login
from eunoia.ui.layout import nav_bar

logger = logging.getLogger(__name__)

PRIORITY_COLORS = {"low": "green", "medium": "orange", "high": "red"}


def validation_message(error: ValidationError) -> str:
    """First human-readable problem in a form's input."""
    return str(error.errors()[0]["msg"]).removeprefix("Value error, ")


@ui.page("/planner")
def planner_page() -> None:
    """Todo list next to the week's schedule."""
    credentials = browser_credentials()
    if not require_login(credentials):
        return

    planner = PlannerApiClient(credentials=credentials)
    week: dict[str, list[TimetableEntry]] = {}

    async def call(action) -> bool:
        """Await a planner request, reporting failures. Returns True on success."""
        try:
            await action
        except AuthenticationRequired:
            redirect_to_login()
            return False
        except ApiError as e:
            logger.warning(f"Planner request failed: {e}")
            ui.notify(f"Request failed: {e}", type="negative")
            return False
        return True

    def render_todo(todo: Todo) -> None:
        with ui.row().classes("w-full items-center no-wrap"):
            ui.checkbox(
                value=todo.completed,
                on_change=lambda e, tid=todo.id: toggle_todo(tid, e.value),
            )
            with ui.column().classes("gap-0 flex-grow"):
                ui.label(todo.title).classes("line-through text-gray-400" if todo.completed else "")
                if todo.due_date:
                    ui.label(f"Due {todo.due_date[:10]}").classes("text-xs text-gray-500")
            if todo.priority:
                ui.badge(todo.priority, color=PRIORITY_COLORS.get(todo.priority, "grey"))
            ui.button(
                icon="delete", on_click=lambda tid=todo.id: remove_todo(tid)
            ).props("flat round dense")

    def render_week() -> None:
        week_column.clear()
        with week_column:
            for day in WEEKDAYS:
                with ui.card().classes("w-full"):
                    ui.label(day.capitalize()).classes("font-medium")
                    slots = sorted(week.get(day, []), key=lambda s: s.start_time)
                    if not slots:
                        ui.label("Nothing scheduled").classes("text-sm text-gray-400")
                    for slot in slots:
                        with ui.row().classes("w-full items-center no-wrap"):
                            ui.element("div").classes("w-3 h-3 rounded-full").style(
                                f"background: {slot.color or DEFAULT_ACTIVITY_COLOR}"
                            )
                            ui.label(f"{slot.start_time}-{slot.end_time}").classes("text-sm")
                            ui.label(slot.activity).classes("flex-grow")
                            ui.button(
                                icon="close", on_click=lambda sid=slot.id: remove_slot(sid)
                            ).props("flat round dense")

    async def load() -> None:
        nonlocal week
        try:
            todos = await planner.get_todos()
            week = await planner.get_week_timetable()
        except AuthenticationRequired:
            redirect_to_login()
            return
        except ApiError as e:
            logger.warning(f"Failed to load planner: {e}")
            ui.notify("Failed to load planner", type="negative")
            return

        todo_column.clear()
        with todo_column:
            if not todos:
                ui.label("No todos yet").classes("text-gray-400")
            for todo in todos:
                render_todo(todo)
        render_week()

    async def add_todo() -> None:
        try:
            todo = TodoInput(
                title=todo_title.value or "",
                priority=todo_priority.value,
                due_date=todo_due.value or None,
            )
        except ValidationError as e:
            ui.notify(validation_message(e), type="warning")
            return
        if await call(planner.create_todo(todo)):
            todo_title.value = ""
            todo_due.value = None
            await load()

    async def toggle_todo(todo_id: str | None, completed: bool) -> None:
        if todo_id and await call(planner.set_todo_completed(todo_id, completed)):
            await load()

    async def remove_todo(todo_id: str | None) -> None:
        if todo_id and await call(planner.delete_todo(todo_id)):
            await load()

    async def add_slot() -> None:
        try:
            entry = TimetableEntryInput(
                day=slot_day.value,
                start_time=slot_start.value or "",
                end_time=slot_end.value or "",
                activity=slot_activity.value or "",
                color=slot_color.value or DEFAULT_ACTIVITY_COLOR,
            )
        except ValidationError as e:
            ui.notify(validation_message(e), type="warning")
            return
        try:
            added = await call(planner.add_timetable_entry(entry, week.get(entry.day, [])))
        except TimetableConflictError as e:
            ui.notify(str(e), type="warning")
            return
        if added:
            slot_activity.value = ""
            await load()

    async def remove_slot(slot_id: str | None) -> None:
        if slot_id and await call(planner.delete_timetable_entry(slot_id)):
            await load()

    # === UI Layout ===
    nav_bar(credentials)
    with ui.row().classes("w-full p-4 gap-6 items-start no-wrap"):
        with ui.column().classes("w-1/2 gap-3"):
            ui.label("Todos").classes("text-xl font-semibold")
            with ui.row().classes("w-full gap-2 items-end"):
                todo_title = ui.input("New todo").classes("flex-grow")
                todo_priority = ui.select(
                    list(PRIORITY_COLORS), value="medium", label="Priority"
                ).classes("w-28")
                todo_due = ui.input("Due").props("type=date").classes("w-40")
                ui.button(icon="add", on_click=add_todo).props("round")
            todo_column = ui.column().classes("w-full gap-1")

        with ui.column().classes("w-1/2 gap-3"):
            ui.label("Timetable").classes("text-xl font-semibold")
            with ui.row().classes("w-full gap-2 items-end"):
                slot_day = ui.select(
                    {day: day.capitalize() for day in WEEKDAYS}, value=WEEKDAYS[0], label="Day"
                ).classes("w-32")
                slot_start = ui.input("Start").props("type=time").classes("w-28")
                slot_end = ui.input("End").props("type=time").classes("w-28")
                slot_activity = ui.input("Activity").classes("flex-grow")
                slot_color = ui.color_input("Color", value=DEFAULT_ACTIVITY_COLOR).classes("w-32")
                ui.button(icon="add", on_click=add_slot).props("round")
            week_column = ui.column().classes("w-full gap-2")

    ui.timer(0.1, load, once=True)
