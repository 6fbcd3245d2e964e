"""NiceGUI journal page: write, browse, filter and delete entries."""

import logging

from nicegui import ui
from pydantic import ValidationError

from eunoia.client.errors import ApiError, AuthenticationRequired
from eunoia.client.journal import JournalApiClient, parse_tags
from eunoia.models.wellness import MOODS, JournalEntry, JournalEntryInput
from eunoia.ui.auth import browser_credentials, redirect_to_login, require_login
from eunoia.ui.layout import nav_bar

logger = logging.getLogger(__name__)

ENTRIES_PER_PAGE = 10


def render_entry(entry: JournalEntry, on_delete) -> None:
    with ui.card().classes("w-full"):
        with ui.row().classes("w-full items-center"):
            ui.label(entry.display_title).classes("text-lg font-medium")
            if entry.mood:
                ui.badge(entry.mood).props("outline")
            ui.space()
            ui.button(icon="delete", on_click=lambda: on_delete(entry)).props("flat round dense")
        if entry.created_at:
            ui.label(f"{entry.created_at:%b %d, %Y %H:%M}").classes("text-xs text-gray-500")
        ui.label(entry.content).classes("whitespace-pre-wrap")
        if entry.tags:
            ui.label(" ".join(f"#{tag}" for tag in entry.tags)).classes("text-sm text-purple-500")


@ui.page("/journal")
def journal_page() -> None:
    """Entry form on top, filtered and paginated entries below."""
    credentials = browser_credentials()
    if not require_login(credentials):
        return

    journal = JournalApiClient(credentials=credentials)
    current_page = 1
    total_pages = 1

    async def load_entries() -> None:
        nonlocal total_pages
        try:
            result = await journal.list_entries(
                page=current_page,
                limit=ENTRIES_PER_PAGE,
                mood=mood_filter.value,
                search=(search.value or "").strip(),
            )
        except AuthenticationRequired:
            redirect_to_login()
            return
        except ApiError as e:
            logger.warning(f"Failed to load journal entries: {e}")
            ui.notify("Failed to load entries", type="negative")
            return

        total_pages = max(result.total_pages, 1)
        entries_column.clear()
        with entries_column:
            if not result.entries:
                ui.label("No entries yet").classes("text-gray-400")
            for entry in result.entries:
                render_entry(entry, delete_entry)
        page_label.set_text(f"Page {current_page} of {total_pages}")
        prev_btn.set_enabled(current_page > 1)
        next_btn.set_enabled(current_page < total_pages)

    async def apply_filters() -> None:
        nonlocal current_page
        current_page = 1
        await load_entries()

    async def change_page(step: int) -> None:
        nonlocal current_page
        current_page = min(max(current_page + step, 1), total_pages)
        await load_entries()

    async def save_entry() -> None:
        try:
            entry = JournalEntryInput(
                title=title.value or "",
                content=content.value or "",
                mood=mood.value,
                tags=parse_tags(tags.value or ""),
            )
        except ValidationError:
            ui.notify("Write something before saving", type="warning")
            return
        try:
            await journal.create_entry(entry)
        except AuthenticationRequired:
            redirect_to_login()
            return
        except ApiError as e:
            ui.notify(f"Failed to save entry: {e}", type="negative")
            return
        title.value = content.value = tags.value = ""
        mood.value = None
        await apply_filters()

    async def delete_entry(entry: JournalEntry) -> None:
        try:
            await journal.delete_entry(entry.id)
        except AuthenticationRequired:
            redirect_to_login()
            return
        except ApiError as e:
            ui.notify(f"Failed to delete entry: {e}", type="negative")
            return
        await load_entries()

    # === UI Layout ===
    nav_bar(credentials)
    with ui.column().classes("w-full max-w-3xl mx-auto p-4 gap-4"):
        with ui.card().classes("w-full"):
            ui.label("New entry").classes("text-lg font-medium")
            title = ui.input("Title").classes("w-full")
            content = ui.textarea("What's on your mind?").classes("w-full")
            with ui.row().classes("w-full gap-4"):
                mood = ui.select(list(MOODS), label="Mood", clearable=True).classes("w-48")
                tags = ui.input("Tags (comma separated)").classes("flex-grow")
            ui.button("Save", on_click=save_entry)

        with ui.row().classes("w-full gap-4 items-end"):
            search = ui.input("Search").classes("flex-grow").on("keydown.enter", apply_filters)
            mood_filter = ui.select(
                list(MOODS), label="Mood", clearable=True, on_change=apply_filters
            ).classes("w-48")

        entries_column = ui.column().classes("w-full gap-3")
        with ui.row().classes("w-full justify-center items-center gap-4"):
            prev_btn = ui.button(icon="chevron_left", on_click=lambda: change_page(-1))
            page_label = ui.label("")
            next_btn = ui.button(icon="chevron_right", on_click=lambda: change_page(1))

    ui.timer(0.1, load_entries, once=True)
