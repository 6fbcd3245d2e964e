"""Eunoia - client for a mental-wellness companion app.

Combines httpx for backend access and response streaming, NiceGUI for the
web front end, and Pydantic for payload validation.

Components:
    - client: Backend API clients and credential handling
    - chat: Chat session state and streamed replies
    - dashboard: Journal and planner statistics
    - ui: Web pages
    - models: Payload and state schemas
"""

__version__ = "0.1.0"
