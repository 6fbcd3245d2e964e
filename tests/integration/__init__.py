"""Integration tests for the clients working together against a backend.

No mocks for client code - requests go through real httpx clients into an
in-process FastAPI backend (tests/fake_backend.py) via ASGITransport.

Coverage:
    - Full chat workflow: session creation, streamed reply, history reload
    - Login, journal CRUD and planner statistics
    - Dashboard loading from both backends

No network access or external services required.
"""
