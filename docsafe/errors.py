"""Error taxonomy for the document pipeline.

Each error carries a machine-readable ``code`` that the HTTP layer copies
into its error payload.
"""


class DocSafeError(Exception):
    """Base class for all pipeline errors."""

    code = "processing_failed"


class InvalidInputError(DocSafeError):
    """Raised when a request is rejected before any processing starts."""

    def __init__(self, message: str, code: str = "invalid_input") -> None:
        super().__init__(message)
        self.code = code


class MalformedDocumentError(DocSafeError):
    """Raised when a container cannot be parsed or rewritten."""

    code = "malformed_document"


class ExtractionError(DocSafeError):
    """Raised when text extraction fails. Recovered inside the extractors."""

    code = "extraction_failed"


class CheckServiceError(DocSafeError):
    """Raised when a call to the grammar-checking service fails or times out."""

    code = "check_service_error"
