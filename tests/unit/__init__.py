"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and derived fields
    - client/: Configuration, credentials and stream line parsing
    - chat/: Session manager state transitions against scripted transports
    - dashboard/: Statistics aggregation

Uses httpx.MockTransport to script backend responses, including broken
streams. Leverages pytest-check for multiple assertions per test.
"""
