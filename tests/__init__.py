"""Test package for the Eunoia client.

Structure:
    - unit/: Models, credentials, stream parsing and chat state in isolation
    - integration/: Clients and chat flow against an in-process fake backend

The fake backend is a FastAPI app served through httpx.ASGITransport, so
integration tests exercise real HTTP handling without a network.
Leverages pytest with pytest-check for soft assertions.
"""
