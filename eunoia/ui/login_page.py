"""NiceGUI login page."""

from nicegui import ui

from eunoia.client.auth import AuthApiClient
from eunoia.client.errors import LoginError
from eunoia.ui.auth import browser_credentials


@ui.page("/login")
def login_page() -> None:
    """Username/password form. Goes straight to the dashboard when already logged in."""
    credentials = browser_credentials()
    if credentials.get_valid_token() is not None:
        ui.navigate.to("/dashboard")
        return

    auth = AuthApiClient(credentials=credentials)

    async def handle_login() -> None:
        try:
            await auth.login(username.value or "", password.value or "")
        except LoginError as e:
            ui.notify(str(e), type="negative")
            return
        ui.navigate.to("/dashboard")

    with ui.column().classes("absolute-center w-80 gap-4"):
        ui.label("EUNOIA").classes("text-4xl font-black self-center")
        ui.label("Your sanctuary for mindful living").classes("text-gray-500 self-center")
        username = ui.input("Username").classes("w-full")
        password = ui.input(
            "Password", password=True, password_toggle_button=True
        ).classes("w-full").on("keydown.enter", handle_login)
        ui.button("Sign In", on_click=handle_login).classes("w-full")
