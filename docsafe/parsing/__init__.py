"""Text extraction and normalization.

Responsibilities:
    - PDF text-layer extraction with pypdf
    - DOCX run extraction from word/document.xml
    - Whitespace and punctuation normalization

Extracted text only feeds the grammar-checking service; it is never
returned to the caller.
"""

from docsafe.models import CleanedDocument, Document, DocumentFormat
from docsafe.parsing.docx_parser import extract_docx_text
from docsafe.parsing.normalizer import normalize_text
from docsafe.parsing.pdf_parser import extract_pdf_text, open_pdf


def extract_text(document: Document | CleanedDocument) -> str:
    """Extract normalized visible text from a document of either format."""
    if document.format is DocumentFormat.PDF:
        return extract_pdf_text(document.content)
    return extract_docx_text(document.content)


__all__ = ["extract_docx_text", "extract_pdf_text", "extract_text", "normalize_text", "open_pdf"]
