"""NiceGUI chat page with a streamed assistant reply."""

from nicegui import ui

from eunoia.chat.session_manager import ChatSessionManager
from eunoia.client.chat import ChatApiClient
from eunoia.models.schemas import Message, Role
from eunoia.ui.auth import browser_credentials, redirect_to_login, require_login
from eunoia.ui.layout import nav_bar

CUSTOM_CSS = """
<style>
    .message-user {
        background: linear-gradient(135deg, #a78bfa 0%, #60a5fa 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }
    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }
    .session-selected { background: #ede9fe; }
</style>
"""


@ui.page("/chat")
def chat_page() -> None:
    """Companion chat: session sidebar, message list and input box."""
    credentials = browser_credentials()
    if not require_login(credentials):
        return

    ui.add_head_html(CUSTOM_CSS)

    messages_container: ui.column
    sidebar: ui.column
    input_field: ui.textarea
    send_btn: ui.button
    response_view: ui.markdown | None = None

    def render_message(msg: Message, streaming: bool = False) -> ui.markdown | None:
        is_user = msg.sender == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with (
            ui.row().classes(f"w-full {align}"),
            ui.element("div").classes(f"max-w-[70%] px-4 py-3 {bubble}"),
        ):
            if is_user:
                ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
                return None
            view = ui.markdown(msg.text or ("..." if streaming else "")).classes("text-sm")
            return view

    def refresh_messages() -> None:
        nonlocal response_view
        response_view = None
        messages_container.clear()
        with messages_container:
            if not manager.messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label("How are you feeling today?").classes("text-lg text-gray-400")
                return
            in_progress = manager.streaming.message_index
            for index, msg in enumerate(manager.messages):
                view = render_message(msg, streaming=index == in_progress)
                if index == in_progress:
                    response_view = view

    def refresh_sidebar() -> None:
        sidebar.clear()
        with sidebar:
            if manager.loading_history:
                ui.spinner()
            for session in manager.history:
                selected = session.session_id == manager.selected_session_id
                ui.button(
                    session.preview,
                    on_click=lambda sid=session.session_id: manager.select_session(sid),
                ).props("flat no-caps align=left").classes(
                    "w-full text-left " + ("session-selected" if selected else "")
                )

    def on_update() -> None:
        send_btn.set_enabled(not manager.is_streaming)
        reply = manager.streaming_reply()
        if reply is not None and response_view is not None:
            response_view.set_content(reply.text or "...")
            return
        refresh_messages()
        refresh_sidebar()

    def on_alert(message: str) -> None:
        ui.notify(message, type="negative")

    manager = ChatSessionManager(
        ChatApiClient(credentials=credentials),
        on_update=on_update,
        on_alert=on_alert,
        on_auth_required=redirect_to_login,
    )

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or manager.is_streaming:
            return
        input_field.value = ""
        await manager.send_message(text)

    # === UI Layout ===
    nav_bar(credentials)
    with ui.row().classes("w-full h-[calc(100vh-56px)] no-wrap"):
        with ui.column().classes("w-72 h-full p-4 gap-2 border-r"):
            ui.button("New chat", icon="add", on_click=manager.start_new_session).classes("w-full")
            with ui.scroll_area().classes("flex-grow w-full"):
                sidebar = ui.column().classes("w-full gap-1")

        with ui.column().classes("flex-grow h-full"):
            with (
                ui.scroll_area().classes("flex-grow w-full bg-gray-50"),
                ui.column().classes("w-full p-5"),
            ):
                messages_container = ui.column().classes("w-full gap-4")

            with ui.row().classes("w-full p-4 gap-3 items-end border-t"):
                input_field = (
                    ui.textarea(placeholder="Share what's on your mind...")
                    .props("autogrow borderless dense rows=1")
                    .classes("flex-grow")
                    .on("keydown.enter.prevent", send_message)
                )
                send_btn = ui.button(icon="send", on_click=send_message).props("round unelevated")

    refresh_messages()
    refresh_sidebar()
    ui.timer(0.1, manager.load_history, once=True)
