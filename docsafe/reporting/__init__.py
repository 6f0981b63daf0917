"""Report generation and bundling.

Responsibilities:
    - Summarizing check matches (total and per rule)
    - Rendering the report as escaped HTML
    - Packaging cleaned document, report.json and report.html into a ZIP
"""

from docsafe.reporting.builder import GENERIC_RULE_ID, build_report
from docsafe.reporting.bundle import REPORT_HTML_ENTRY, REPORT_JSON_ENTRY, assemble_bundle
from docsafe.reporting.html import render_report_html

__all__ = [
    "GENERIC_RULE_ID",
    "REPORT_HTML_ENTRY",
    "REPORT_JSON_ENTRY",
    "assemble_bundle",
    "build_report",
    "render_report_html",
]
