"""Main application entry point.

Serves the NiceGUI front end mounted on a FastAPI app (port 8000).
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def create_app():
    """Create the FastAPI application hosting the NiceGUI pages.

    Returns:
        Configured FastAPI application instance.
    """
    from fastapi import FastAPI
    from nicegui import ui

    # Importing the page modules registers their routes
    from eunoia.ui import (  # noqa: F401
        chat_page,
        dashboard_page,
        emotions_page,
        journal_page,
        login_page,
        planner_page,
    )

    application = FastAPI(title="Eunoia", version="0.1.0", docs_url=None, redoc_url=None)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "eunoia-web"}

    ui.run_with(
        application,
        title="Eunoia",
        favicon="🌸",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "eunoia-storage-secret"),
    )
    return application


def main() -> None:
    """Application entry point."""
    import uvicorn

    app = create_app()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    logger.info(f"Starting Eunoia on http://{host}:{port}")
    logger.info(f"Backend API: {os.getenv('EUNOIA_API_URL', 'http://localhost:5000')}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
