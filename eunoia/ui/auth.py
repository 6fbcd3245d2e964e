"""Per-browser credentials for NiceGUI pages."""

from nicegui import app, ui

from eunoia.client.credentials import CredentialProvider, StorageCredentialProvider


def browser_credentials() -> CredentialProvider:
    """Token provider backed by the current browser's persistent storage."""
    return StorageCredentialProvider(app.storage.user)


def redirect_to_login() -> None:
    ui.navigate.to("/login")


def require_login(credentials: CredentialProvider) -> bool:
    """Send the browser to the login page unless a usable token is stored.

    Returns:
        True if the page may render.
    """
    if credentials.get_valid_token() is None:
        redirect_to_login()
        return False
    return True
