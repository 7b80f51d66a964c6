"""Document parsing for knowledge uploads.

Extracts plain text from PDF (pypdf), CSV and TXT files with validation.
"""

import csv
import io
import logging
from pathlib import PurePath

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
SUPPORTED_EXTENSIONS = (".pdf", ".txt", ".csv")


class DocumentContent(BaseModel):
    """Extracted content from an uploaded document.

    Attributes:
        text: Combined text content.
        kind: Source format (pdf, csv or txt).
        sections: Number of pages (PDF), rows (CSV) or paragraphs (TXT).
        metadata: Document metadata (title, author, etc.).
    """

    text: str
    kind: str
    sections: int = Field(ge=0)
    metadata: dict[str, str] = Field(default_factory=dict)


class DocumentParseError(Exception):
    """Raised when document parsing fails."""

    pass


def document_kind(filename: str) -> str:
    """Return the document kind for a filename.

    Args:
        filename: Uploaded filename.

    Returns:
        One of ``pdf``, ``csv`` or ``txt``.

    Raises:
        DocumentParseError: If the extension is not supported.
    """
    suffix = PurePath(filename).suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise DocumentParseError(
            f"Unsupported file type '{suffix or filename}': only PDF, TXT and CSV files are accepted"
        )
    return suffix.lstrip(".")


def _validate_bytes(file_content: bytes) -> None:
    """Validate raw upload bytes before parsing.

    Args:
        file_content: Raw bytes of the file.

    Raises:
        DocumentParseError: If validation fails.
    """
    if not file_content:
        raise DocumentParseError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise DocumentParseError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")


def _decode(file_content: bytes) -> str:
    try:
        return file_content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Invalid text encoding (expected UTF-8): {e}") from e


def _extract_metadata(reader: PdfReader) -> dict[str, str]:
    """Extract metadata from PDF reader.

    Args:
        reader: Initialized PdfReader instance.

    Returns:
        Dictionary of the metadata fields that are set.
    """
    metadata: dict[str, str | None] = {}

    try:
        if reader.metadata:
            metadata["title"] = reader.metadata.get("/Title")
            metadata["author"] = reader.metadata.get("/Author")
            metadata["subject"] = reader.metadata.get("/Subject")
    except Exception as e:
        logger.warning(f"Failed to extract some metadata: {e}")

    return {k: str(v) for k, v in metadata.items() if v is not None}


def parse_pdf(file_content: bytes) -> DocumentContent:
    """Parse a PDF file and extract its text content.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        DocumentContent with extracted text, page count, and metadata.

    Raises:
        DocumentParseError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_bytes(file_content)

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise DocumentParseError("Invalid PDF: file does not start with PDF header")

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise DocumentParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise DocumentParseError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise DocumentParseError("PDF contains no pages")

    text_parts: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            continue

    text = "\n\n".join(text_parts)

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return DocumentContent(
        text=text,
        kind="pdf",
        sections=pages,
        metadata=_extract_metadata(reader),
    )


def parse_csv(file_content: bytes) -> DocumentContent:
    """Parse a CSV file into one text line per row.

    The first row is treated as a header; each data row becomes
    ``header: value`` pairs so rows stay searchable on their own.

    Args:
        file_content: Raw bytes of the CSV file.

    Returns:
        DocumentContent with one line per data row.

    Raises:
        DocumentParseError: If the file is empty, too large, or not UTF-8.
    """
    _validate_bytes(file_content)

    try:
        rows = [row for row in csv.reader(io.StringIO(_decode(file_content))) if any(row)]
    except csv.Error as e:
        raise DocumentParseError(f"Corrupt CSV: {e}") from e

    if not rows:
        raise DocumentParseError("CSV contains no rows")

    header, *data = rows
    if not data:
        lines = [", ".join(header)]
    else:
        lines = [
            "; ".join(f"{name}: {value}" for name, value in zip(header, row) if value)
            for row in data
        ]

    return DocumentContent(text="\n".join(lines), kind="csv", sections=len(lines))


def parse_text(file_content: bytes) -> DocumentContent:
    """Parse a plain text file.

    Args:
        file_content: Raw bytes of the text file.

    Returns:
        DocumentContent with the decoded text.

    Raises:
        DocumentParseError: If the file is empty, too large, or not UTF-8.
    """
    _validate_bytes(file_content)
    text = _decode(file_content)
    paragraphs = [p for p in text.split("\n\n") if p.strip()]
    return DocumentContent(text=text, kind="txt", sections=len(paragraphs))


def parse_document(filename: str, file_content: bytes) -> DocumentContent:
    """Parse an uploaded document according to its extension.

    Args:
        filename: Uploaded filename, used to pick the parser.
        file_content: Raw bytes of the file.

    Returns:
        Extracted DocumentContent.

    Raises:
        DocumentParseError: If the type is unsupported or parsing fails.
    """
    parsers = {"pdf": parse_pdf, "csv": parse_csv, "txt": parse_text}
    return parsers[document_kind(filename)](file_content)
