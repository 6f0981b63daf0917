"""Metadata removal for PDF and DOCX containers.

The sanitizer variant is chosen by the format declared at upload; content is
never sniffed.
"""

import logging

from docsafe.errors import InvalidInputError
from docsafe.models import CleanedDocument, Document, DocumentFormat
from docsafe.naming import cleaned_filename
from docsafe.sanitizing.docx_sanitizer import sanitize_docx
from docsafe.sanitizing.pdf_sanitizer import sanitize_pdf

logger = logging.getLogger(__name__)


def sanitize_document(document: Document) -> CleanedDocument:
    """Produce a metadata-free copy of a document.

    Args:
        document: Document as uploaded.

    Returns:
        CleanedDocument in the same format, named ``<stem>_cleaned.<ext>``.

    Raises:
        InvalidInputError: If given an already cleaned document.
        MalformedDocumentError: If the container cannot be parsed or rewritten.
    """
    if isinstance(document, CleanedDocument):
        raise InvalidInputError("Document has already been sanitized")

    if document.format is DocumentFormat.PDF:
        content = sanitize_pdf(document.content)
    else:
        content = sanitize_docx(document.content)

    cleaned = CleanedDocument(
        content=content,
        format=document.format,
        filename=cleaned_filename(document.filename, document.format),
        source_filename=document.filename,
    )
    logger.info(f"Sanitized {document.filename} ({len(document.content)} -> {len(content)} bytes)")
    return cleaned


__all__ = ["sanitize_docx", "sanitize_document", "sanitize_pdf"]
