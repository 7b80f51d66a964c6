"""Unit tests for individual components in isolation.

Coverage:
    - state/: Conversation store mutations and snapshots
    - ui/: Projection, render/bind engine and request orchestration
    - client/: Error translation and response parsing
    - parsing/, knowledge/: Upload parsing, knowledge store wiring and answering

Uses httpx MockTransport in place of the backend.
"""
