"""Knowledge upload endpoint.

Handles file upload, validation, parsing, and knowledge base storage.
"""

import logging

from fastapi import APIRouter, HTTPException, UploadFile, status

from campus_chat.api.dependencies import KnowledgeBaseDep
from campus_chat.models.schemas import KnowledgeUploadResult
from campus_chat.parsing.documents import (
    MAX_FILE_SIZE,
    DocumentParseError,
    document_kind,
    parse_document,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["knowledge"])

# 10MB limit matches the parser constant
MAX_UPLOAD_SIZE = MAX_FILE_SIZE


def _validate_filename(filename: str | None) -> str:
    """Validate that the file has a supported extension.

    Args:
        filename: The uploaded filename.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if the name is missing or the extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    try:
        document_kind(filename)
    except DocumentParseError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return filename


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/upload-knowledge", response_model=KnowledgeUploadResult)
async def upload_knowledge(
    file: UploadFile,
    knowledge_base: KnowledgeBaseDep,
) -> KnowledgeUploadResult:
    """Upload a PDF, TXT or CSV document into the knowledge base.

    Args:
        file: The uploaded document (multipart/form-data field ``file``).
        knowledge_base: Store the extracted text is added to.

    Returns:
        KnowledgeUploadResult with filename, document kind and section count.

    Raises:
        400: Invalid file (unsupported type, empty, corrupt, no extractable text).
        413: File exceeds 10MB limit.
        500: Internal processing error.
    """
    filename = _validate_filename(file.filename)
    content = await _read_and_validate_size(file)

    try:
        document = parse_document(filename, content)
    except DocumentParseError as e:
        logger.warning(f"Parse error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    if not document.text.strip():
        logger.warning(f"No text extracted from {filename}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"No text could be extracted from {filename}",
        )

    try:
        await knowledge_base.add_document(filename, document.text, document.metadata)
    except Exception as e:
        logger.error(f"Failed to store document in knowledge base: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store document in knowledge base",
        ) from e

    logger.info(f"Ingested {document.kind} document: {filename} ({document.sections} sections)")
    return KnowledgeUploadResult(filename=filename, kind=document.kind, sections=document.sections)
