"""Integration tests for components working together as a system.

The widget talks HTTP to the real demo backend in-process through
ASGITransport, and the NiceGUI view is driven through a simulated user.
"""
