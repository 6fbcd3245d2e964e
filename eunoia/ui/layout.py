"""Navigation shared by the signed-in pages."""

from nicegui import ui

from eunoia.client.credentials import CredentialProvider
from eunoia.ui.auth import redirect_to_login

NAV_LINKS = (
    ("Dashboard", "/dashboard"),
    ("Chat", "/chat"),
    ("Journal", "/journal"),
    ("Planner", "/planner"),
    ("Emotions", "/emotions"),
)


def nav_bar(credentials: CredentialProvider) -> None:
    """Links to every page and a logout button that forgets the token."""

    def logout() -> None:
        credentials.clear()
        redirect_to_login()

    with ui.row().classes("w-full px-4 py-2 gap-4 items-center border-b"):
        ui.label("EUNOIA").classes("font-black")
        for label, target in NAV_LINKS:
            ui.link(label, target)
        ui.space()
        ui.button("Logout", on_click=logout).props("flat no-caps")
