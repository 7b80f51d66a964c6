"""Test package for Campus Chat.

Structure:
    - unit/: Store, projection, engine, controller, client and parser tests
    - integration/: Demo backend endpoints and the full widget loop over HTTP

Backend calls are served either by an httpx MockTransport or by the real
FastAPI app through ASGITransport. No network access is needed.
Leverages pytest with pytest-check for soft assertions.
"""
