"""Document cleaning endpoints.

Handles upload validation, sanitization, and report bundle generation.
"""

import logging
from urllib.parse import quote

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Request,
    Response,
    UploadFile,
    status,
)

from docsafe.api.config import ApiConfig
from docsafe.checking import AUTO_LANGUAGE, GrammarCheckClient, get_check_client
from docsafe.errors import DocSafeError, InvalidInputError
from docsafe.models import Document, DocumentFormat, ErrorDetail
from docsafe.pipeline import build_report_bundle, clean_document

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])

PROCESSING_FAILED = "Processing failed"

_STATUS_BY_CODE = {
    "missing_file": status.HTTP_400_BAD_REQUEST,
    "unsupported_format": status.HTTP_400_BAD_REQUEST,
    "file_too_large": status.HTTP_413_CONTENT_TOO_LARGE,
    "malformed_document": status.HTTP_422_UNPROCESSABLE_CONTENT,
    "check_service_error": status.HTTP_502_BAD_GATEWAY,
}

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"description": "Missing file or unsupported format"},
    status.HTTP_413_CONTENT_TOO_LARGE: {"description": "File exceeds the upload limit"},
    status.HTTP_422_UNPROCESSABLE_CONTENT: {"description": "Document could not be parsed"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Processing failed"},
}


def get_app_config(request: Request) -> ApiConfig:
    """Return the configuration the application was created with."""
    return request.app.state.config


def _http_error(error: DocSafeError) -> HTTPException:
    """Translate a pipeline error into an HTTP error with a structured payload."""
    status_code = _STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(error, InvalidInputError):
        detail = ErrorDetail(error=str(error), code=error.code)
    else:
        detail = ErrorDetail(error=PROCESSING_FAILED, code=error.code, message=str(error))
    return HTTPException(status_code=status_code, detail=detail.model_dump())


def _unexpected_error() -> HTTPException:
    detail = ErrorDetail(error=PROCESSING_FAILED, code="processing_failed")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail.model_dump(),
    )


async def _read_document(file: UploadFile | None, max_size: int) -> Document:
    """Validate the upload and read it into a Document.

    The extension is checked before the body is read, so unsupported files
    are rejected without any processing.

    Raises:
        InvalidInputError: If the file is missing, unsupported or too large.
    """
    if file is None or not file.filename:
        raise InvalidInputError("Missing file", code="missing_file")

    DocumentFormat.from_filename(file.filename)
    content = await file.read()

    if len(content) > max_size:
        size_mb = len(content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise InvalidInputError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)",
            code="file_too_large",
        )

    return Document.from_upload(file.filename, content)


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{quote(filename)}"'}


@router.post(
    "/clean",
    response_class=Response,
    responses={
        status.HTTP_200_OK: {"content": {"application/pdf": {}, "application/octet-stream": {}}},
        **_ERROR_RESPONSES,
    },
)
async def clean(
    file: UploadFile | None = File(None),
    config: ApiConfig = Depends(get_app_config),
) -> Response:
    """Remove metadata from an uploaded PDF or DOCX.

    Args:
        file: The uploaded document (multipart/form-data).

    Returns:
        The cleaned document as an attachment named ``<name>_cleaned.<ext>``.

    Raises:
        400: Missing file or unsupported extension.
        413: File exceeds the upload limit.
        422: Document could not be parsed.
        500: Internal processing error.
    """
    try:
        document = await _read_document(file, config.max_upload_size)
        cleaned = await clean_document(document)
    except InvalidInputError as e:
        logger.warning(f"Rejected upload: {e}")
        raise _http_error(e) from e
    except DocSafeError as e:
        logger.error(f"CLEAN error for {file.filename if file else None}: {e}")
        raise _http_error(e) from e
    except Exception as e:
        logger.exception("CLEAN error")
        raise _unexpected_error() from e
    finally:
        if file is not None:
            await file.close()

    logger.info(f"Cleaned {document.filename} -> {cleaned.filename}")
    return Response(
        content=cleaned.content,
        media_type=cleaned.format.media_type,
        headers=_attachment(cleaned.filename),
    )


@router.post(
    "/clean-v2",
    response_class=Response,
    responses={
        status.HTTP_200_OK: {"content": {"application/zip": {}}},
        status.HTTP_502_BAD_GATEWAY: {"description": "Checking service failed"},
        **_ERROR_RESPONSES,
    },
)
async def clean_with_report(
    file: UploadFile | None = File(None),
    lt_language: str = Form(AUTO_LANGUAGE),
    config: ApiConfig = Depends(get_app_config),
    checker: GrammarCheckClient = Depends(get_check_client),
) -> Response:
    """Clean a document and return it with a proofreading report.

    Args:
        file: The uploaded document (multipart/form-data).
        lt_language: Language code for the checking service, "auto" by default.

    Returns:
        ZIP archive with the cleaned document, report.json and report.html.

    Raises:
        400: Missing file or unsupported extension.
        413: File exceeds the upload limit.
        422: Document could not be parsed.
        502: Checking service failed or timed out.
        500: Internal processing error.
    """
    language = lt_language.strip() or AUTO_LANGUAGE

    try:
        document = await _read_document(file, config.max_upload_size)
        bundle = await build_report_bundle(document, language, checker)
    except InvalidInputError as e:
        logger.warning(f"Rejected upload: {e}")
        raise _http_error(e) from e
    except DocSafeError as e:
        logger.error(f"CLEAN-V2 error for {file.filename if file else None}: {e}")
        raise _http_error(e) from e
    except Exception as e:
        logger.exception("CLEAN-V2 error")
        raise _unexpected_error() from e
    finally:
        if file is not None:
            await file.close()

    return Response(
        content=bundle.content,
        media_type="application/zip",
        headers=_attachment(bundle.filename),
    )
