"""NiceGUI widget - state-driven render/interaction loop.

Responsibilities:
    - Project conversation state into a renderable description
    - Rebuild the whole widget on every render and rebind its handlers
    - Orchestrate chat sends, FAQ short-circuits, uploads and the FAQ load

Holds no state of its own beyond element handles recreated every render.
All backend access goes through the HTTP client.
"""
