"""ZIP bundle with the cleaned document and its report files."""

import io
import zipfile

from docsafe.models import Bundle, CleanedDocument, Report
from docsafe.naming import bundle_filename

REPORT_JSON_ENTRY = "report.json"
REPORT_HTML_ENTRY = "report.html"


def assemble_bundle(cleaned: CleanedDocument, report: Report, report_html: str) -> Bundle:
    """Package a cleaned document with its JSON and HTML reports.

    Args:
        cleaned: Sanitized document, stored under its derived filename.
        report: Report serialized to ``report.json``.
        report_html: Rendering stored as ``report.html``.

    Returns:
        Bundle named after the source document.
    """
    entries = (cleaned.filename, REPORT_JSON_ENTRY, REPORT_HTML_ENTRY)
    output = io.BytesIO()
    with zipfile.ZipFile(output, "w", zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(cleaned.filename, cleaned.content)
        archive.writestr(REPORT_JSON_ENTRY, report.to_json())
        archive.writestr(REPORT_HTML_ENTRY, report_html)

    return Bundle(
        filename=bundle_filename(cleaned.source_filename),
        content=output.getvalue(),
        entries=entries,
    )
