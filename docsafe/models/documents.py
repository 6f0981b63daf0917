"""Document models flowing through the sanitization pipeline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from docsafe.errors import InvalidInputError


class DocumentFormat(str, Enum):
    """Container formats the pipeline knows how to sanitize."""

    PDF = "pdf"
    DOCX = "docx"

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @property
    def media_type(self) -> str:
        if self is DocumentFormat.PDF:
            return "application/pdf"
        return "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    @classmethod
    def from_filename(cls, filename: str) -> "DocumentFormat":
        """Infer the format from a filename extension.

        Args:
            filename: Original filename as uploaded.

        Returns:
            The matching DocumentFormat.

        Raises:
            InvalidInputError: If the extension is neither .pdf nor .docx.
        """
        lower = filename.lower()
        for fmt in cls:
            if lower.endswith(fmt.extension):
                return fmt
        raise InvalidInputError("Only PDF or DOCX are supported", code="unsupported_format")


class Document(BaseModel):
    """An uploaded document as received.

    Attributes:
        content: Raw bytes of the file.
        format: Declared container format, fixed at ingestion.
        filename: Original filename.
    """

    model_config = ConfigDict(frozen=True)

    content: bytes = Field(repr=False)
    format: DocumentFormat
    filename: str

    @classmethod
    def from_upload(cls, filename: str, content: bytes) -> "Document":
        """Build a document, taking its format from the filename extension.

        Raises:
            InvalidInputError: If the extension is neither .pdf nor .docx.
        """
        document_format = DocumentFormat.from_filename(filename)
        return cls(content=content, format=document_format, filename=filename)


class CleanedDocument(BaseModel):
    """A document with its metadata removed.

    Attributes:
        content: Sanitized bytes, valid in the original format.
        format: Container format, same as the source document.
        filename: Derived output filename (``<stem>_cleaned.<ext>``).
        source_filename: Filename of the document it was cleaned from.
    """

    model_config = ConfigDict(frozen=True)

    content: bytes = Field(repr=False)
    format: DocumentFormat
    filename: str
    source_filename: str


class Bundle(BaseModel):
    """ZIP archive holding a cleaned document and its report files."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content: bytes = Field(repr=False)
    entries: tuple[str, ...]
