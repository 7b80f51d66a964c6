"""FastAPI demo backend for the chat widget.

Implements the HTTP contracts the widget relies on, so it can run
standalone. The widget itself only talks to these routes over HTTP.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Answer a question
    - GET /api/faqs: FAQ catalogue
    - POST /api/upload-knowledge: Add a PDF/TXT/CSV to the knowledge base
"""
