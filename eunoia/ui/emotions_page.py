"""NiceGUI emotion logging page."""

import logging

from nicegui import ui
from pydantic import ValidationError

from eunoia.client.emotion import EmotionApiClient
from eunoia.client.errors import ApiError, AuthenticationRequired
from eunoia.models.emotion import (
    EMOTION_CATEGORIES,
    EmotionLog,
    EmotionLogInput,
    OptionType,
    UserOptions,
)
from eunoia.ui.auth import browser_credentials, redirect_to_login, require_login
from eunoia.ui.layout import nav_bar

logger = logging.getLogger(__name__)


def render_log(log: EmotionLog) -> None:
    with ui.card().classes("w-full"):
        with ui.row().classes("w-full items-center"):
            ui.label(log.mood).classes("text-lg font-medium")
            ui.label(f"Intensity: {log.intensity if log.intensity is not None else '-'}").classes(
                "text-xs text-gray-500"
            )
            ui.space()
            if log.timestamp:
                ui.label(f"{log.timestamp:%b %d, %Y %H:%M}").classes("text-xs text-gray-500")
        if log.context:
            ui.label(" · ".join(log.context)).classes("text-sm text-gray-600")
        if log.note:
            ui.label(log.note).classes("whitespace-pre-wrap")


@ui.page("/emotions")
def emotions_page() -> None:
    """Mood picker with context choices and the log history."""
    credentials = browser_credentials()
    if not require_login(credentials):
        return

    emotions = EmotionApiClient(credentials=credentials)
    context_selects: dict[str, ui.select] = {}

    def apply_options(options: UserOptions) -> None:
        for option_type, select in context_selects.items():
            select.set_options(options.choices(option_type))

    async def load() -> None:
        try:
            options = await emotions.get_user_options()
            logs = await emotions.list_logs()
        except AuthenticationRequired:
            redirect_to_login()
            return
        except ApiError as e:
            logger.warning(f"Failed to load emotion logs: {e}")
            ui.notify("Failed to load emotion logs", type="negative")
            return

        apply_options(options)
        history.clear()
        with history:
            if not logs:
                ui.label("No emotions logged yet").classes("text-gray-400")
            for log in logs:
                render_log(log)

    async def add_option(option_type: OptionType, field: ui.input) -> None:
        try:
            options = await emotions.add_user_option(option_type, field.value or "")
        except ValidationError:
            ui.notify("Enter a value first", type="warning")
            return
        except AuthenticationRequired:
            redirect_to_login()
            return
        except ApiError as e:
            ui.notify(f"Failed to add option: {e}", type="negative")
            return
        apply_options(options)
        context_selects[option_type].value = field.value.strip()
        field.value = ""

    async def save_log() -> None:
        try:
            entry = EmotionLogInput(
                mood=mood.value or "",
                intensity=int(intensity.value),
                note=note.value or "",
                **{key: select.value or "" for key, select in context_selects.items()},
            )
        except ValidationError:
            ui.notify("Pick how you feel first", type="warning")
            return
        try:
            await emotions.log_emotion(entry)
        except AuthenticationRequired:
            redirect_to_login()
            return
        except ApiError as e:
            ui.notify(f"Failed to log emotion: {e}", type="negative")
            return
        ui.notify("Emotion logged", type="positive")
        note.value = ""
        await load()

    # === UI Layout ===
    nav_bar(credentials)
    with ui.row().classes("w-full p-4 gap-6 items-start no-wrap"):
        with ui.card().classes("w-1/2"):
            ui.label("How are you feeling?").classes("text-xl font-semibold")
            mood = ui.select(
                {
                    feeling: f"{category}: {feeling}"
                    for category, feelings in EMOTION_CATEGORIES.items()
                    for feeling in feelings
                },
                label="Emotion",
                with_input=True,
            ).classes("w-full")
            ui.label("Intensity")
            intensity = ui.slider(min=1, max=10, step=1, value=5).props("label-always")
            for option_type, label in (
                ("location", "Where are you?"),
                ("company", "Who are you with?"),
                ("activity", "What are you doing?"),
            ):
                with ui.row().classes("w-full gap-2 items-end no-wrap"):
                    context_selects[option_type] = ui.select(
                        [], label=label, clearable=True
                    ).classes("flex-grow")
                    custom = ui.input(f"Add {option_type}").classes("w-36")
                    ui.button(
                        icon="add",
                        on_click=lambda t=option_type, f=custom: add_option(t, f),
                    ).props("flat round dense")
            note = ui.textarea("Note").classes("w-full")
            ui.button("Log emotion", on_click=save_log).classes("w-full")

        with ui.column().classes("w-1/2 gap-3"):
            ui.label("History").classes("text-xl font-semibold")
            history = ui.column().classes("w-full gap-2")

    ui.timer(0.1, load, once=True)
