"""Campus Chat - state-driven conversational widget for college enquiries.

Combines NiceGUI for the widget, HTTPX for backend requests, Pydantic for
data validation, and FastAPI for the bundled demo backend.

Components:
    - state: Conversation state store
    - ui: Render/bind engine, view and request orchestration
    - client: HTTP client for the chat, upload and FAQ endpoints
    - api: Demo backend implementing the widget's HTTP contracts
    - knowledge: In-memory knowledge base behind the demo backend
    - parsing: Text extraction for uploaded PDF/CSV/TXT documents
    - models: Request/response and state schemas
"""

__version__ = "0.1.0"
