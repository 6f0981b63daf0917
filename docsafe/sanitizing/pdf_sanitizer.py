"""PDF metadata removal using pypdf.

Pages are copied into a freshly constructed writer, so the catalog (and any
XMP metadata stream hanging off it) is not carried over. The information
dictionary is then rewritten with blank values and fixed dates.
"""

import io
import logging

from pypdf import PdfWriter

from docsafe.errors import MalformedDocumentError
from docsafe.parsing.pdf_parser import open_pdf

logger = logging.getLogger(__name__)

# Fixed instead of "now" so the processing time does not leak into the file
EPOCH_DATE = "D:19700101000000Z"

BLANK_METADATA: dict[str, str] = {
    "/Title": "",
    "/Author": "",
    "/Subject": "",
    "/Keywords": "",
    "/Producer": "",
    "/Creator": "",
    "/CreationDate": EPOCH_DATE,
    "/ModDate": EPOCH_DATE,
}


def sanitize_pdf(file_content: bytes) -> bytes:
    """Rewrite a PDF without identifying metadata.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        Bytes of the cleaned PDF, same pages in the same order.

    Raises:
        MalformedDocumentError: If the PDF cannot be parsed or rewritten.
    """
    reader = open_pdf(file_content)

    try:
        writer = PdfWriter()
        for page in reader.pages:
            writer.add_page(page)
        writer.add_metadata(BLANK_METADATA)

        output = io.BytesIO()
        writer.write(output)
    except Exception as e:
        raise MalformedDocumentError(f"Failed to rewrite PDF: {e}") from e

    logger.debug(f"Rewrote PDF with {len(reader.pages)} pages")
    return output.getvalue()
