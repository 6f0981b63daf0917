"""Document pipeline: sanitize, extract, check, report, bundle.

Stages run strictly in sequence for one request. Only the checking step
performs I/O; the container work, report rendering and compression are
CPU-bound and run in the threadpool.
"""

import logging

from fastapi.concurrency import run_in_threadpool

from docsafe.checking import GrammarCheckClient
from docsafe.models import Bundle, CleanedDocument, Document
from docsafe.parsing import extract_text
from docsafe.reporting import assemble_bundle, build_report, render_report_html
from docsafe.sanitizing import sanitize_document

logger = logging.getLogger(__name__)


async def clean_document(document: Document) -> CleanedDocument:
    """Remove metadata from a document.

    Raises:
        MalformedDocumentError: If the container cannot be rewritten.
    """
    return await run_in_threadpool(sanitize_document, document)


async def build_report_bundle(
    document: Document,
    language: str,
    checker: GrammarCheckClient,
) -> Bundle:
    """Clean a document and bundle it with a proofreading report.

    Text is extracted from the cleaned document. Any failure aborts the
    whole operation, so a bundle is either complete or not produced.

    Args:
        document: Document as uploaded.
        language: Language code for the checking service, or "auto".
        checker: Client for the checking service.

    Returns:
        Bundle with the cleaned document, report.json and report.html.

    Raises:
        MalformedDocumentError: If the container cannot be rewritten.
        CheckServiceError: If the checking service fails.
    """
    cleaned = await clean_document(document)
    text = await run_in_threadpool(extract_text, cleaned)

    matches = await checker.check(text, language)

    report = build_report(
        file_name=cleaned.filename,
        language=language,
        text_length=len(text),
        matches=matches,
    )
    report_html = await run_in_threadpool(render_report_html, report)
    bundle = await run_in_threadpool(assemble_bundle, cleaned, report, report_html)
    logger.info(
        f"Built report bundle {bundle.filename}: "
        f"{report.summary.total_issues} issues in {len(text)} chars"
    )
    return bundle
