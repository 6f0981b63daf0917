"""PDF parsing module using pypdf.

Opens PDF containers with validation and extracts their text layer for
the checking service.
"""

import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from docsafe.errors import ExtractionError, MalformedDocumentError
from docsafe.parsing.normalizer import normalize_text

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        MalformedDocumentError: If validation fails.
    """
    if not file_content:
        raise MalformedDocumentError("Empty file provided")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise MalformedDocumentError("Invalid PDF: file does not start with PDF header")


def open_pdf(file_content: bytes) -> PdfReader:
    """Open a PDF container for reading.

    Encrypted files are opened with the empty user password, which covers
    documents that are only restricted, not protected.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        Initialized PdfReader.

    Raises:
        MalformedDocumentError: If the file is empty, not a PDF, corrupt,
            password protected, or has no pages.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        if reader.is_encrypted and not reader.decrypt(""):
            raise MalformedDocumentError("PDF is password protected")
        pages = len(reader.pages)
    except MalformedDocumentError:
        raise
    except PdfReadError as e:
        raise MalformedDocumentError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise MalformedDocumentError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise MalformedDocumentError("PDF contains no pages")

    return reader


def _read_text_layer(file_content: bytes) -> str:
    try:
        reader = open_pdf(file_content)
    except MalformedDocumentError as e:
        raise ExtractionError(str(e)) from e

    text_parts: list[str] = []
    try:
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    except Exception as e:
        raise ExtractionError(f"Failed to extract page text: {e}") from e

    return "\n".join(text_parts)


def extract_pdf_text(file_content: bytes) -> str:
    """Extract normalized text from a PDF.

    Extraction is best-effort: any failure is logged and yields an empty
    string so that sanitization can still succeed.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        Normalized text of all pages, or "" if nothing could be extracted.
    """
    try:
        text = _read_text_layer(file_content)
    except ExtractionError as e:
        logger.warning(f"PDF text extraction failed: {e}")
        return ""

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return normalize_text(text)
