"""Document parsing utilities for knowledge uploads.

Responsibilities:
    - PDF text extraction with pypdf
    - CSV rows flattened into searchable lines
    - UTF-8 text decoding
    - Size and format validation shared by all three

Output feeds the in-memory knowledge base behind the demo backend.
"""

from campus_chat.parsing.documents import (
    DocumentContent,
    DocumentParseError,
    parse_document,
)

__all__ = ["DocumentContent", "DocumentParseError", "parse_document"]
