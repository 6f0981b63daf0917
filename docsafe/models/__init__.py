"""Pydantic models for documents, check results, reports and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - DocumentFormat: Supported container formats (pdf, docx)
    - Document: Uploaded document as received
    - CleanedDocument: Document with its metadata removed
    - CheckMatch: One issue reported by the checking service
    - Report: Summary plus ordered matches
    - Bundle: ZIP archive with cleaned document and report files
    - ErrorDetail: Structured error payload returned by the API
"""

from docsafe.models.documents import Bundle, CleanedDocument, Document, DocumentFormat
from docsafe.models.report import (
    CheckMatch,
    CheckResponse,
    MatchContext,
    MatchRule,
    Replacement,
    Report,
    ReportSummary,
)
from docsafe.models.schemas import ErrorDetail, HealthResponse

__all__ = [
    "Bundle",
    "CheckMatch",
    "CheckResponse",
    "CleanedDocument",
    "Document",
    "DocumentFormat",
    "ErrorDetail",
    "HealthResponse",
    "MatchContext",
    "MatchRule",
    "Replacement",
    "Report",
    "ReportSummary",
]
