"""Unit tests for PDF parser module."""

import pytest
import pytest_check as check

from docsafe.errors import MalformedDocumentError
from docsafe.parsing.pdf_parser import extract_pdf_text, open_pdf
from tests.builders import make_pdf


class TestOpenPdf:
    """Tests for PDF validation and rejection."""

    def test_opens_valid_pdf(self, sample_pdf: bytes) -> None:
        """Valid PDF opens with its page count."""
        reader = open_pdf(sample_pdf)

        assert len(reader.pages) == 2

    def test_rejects_empty_bytes(self) -> None:
        """Empty bytes raises MalformedDocumentError."""
        with pytest.raises(MalformedDocumentError, match="Empty file"):
            open_pdf(b"")

    def test_rejects_non_pdf_file(self) -> None:
        """Non-PDF content raises MalformedDocumentError."""
        with pytest.raises(MalformedDocumentError, match="Invalid PDF"):
            open_pdf(b"This is not a real PDF file, just text")

    def test_rejects_truncated_pdf(self) -> None:
        """Truncated PDF raises MalformedDocumentError."""
        with pytest.raises(MalformedDocumentError, match="Corrupt|Failed|no pages"):
            open_pdf(b"%PDF-1.4\n1 0 obj\n<<")


class TestExtractPdfText:
    """Tests for best-effort text extraction."""

    def test_extracts_and_normalizes_text(self, sample_pdf: bytes) -> None:
        """Text of every page is returned, normalized, in page order."""
        text = extract_pdf_text(sample_pdf)

        check.is_in("Hello world, test", text)
        check.is_in("Second page text.", text)
        check.less(text.index("Hello"), text.index("Second"))

    def test_image_only_pdf_yields_empty_text(self) -> None:
        """Pages without a text layer produce an empty string."""
        assert extract_pdf_text(make_pdf(["", ""])) == ""

    def test_unreadable_pdf_yields_empty_text(self) -> None:
        """Extraction failures are swallowed."""
        assert extract_pdf_text(b"garbage") == ""

    def test_page_failure_yields_empty_text(
        self, sample_pdf: bytes, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An exception from the text layer degrades to an empty string."""
        from pypdf import PageObject

        def fail(*args: object, **kwargs: object) -> str:
            raise RuntimeError("broken content stream")

        monkeypatch.setattr(PageObject, "extract_text", fail)

        assert extract_pdf_text(sample_pdf) == ""
