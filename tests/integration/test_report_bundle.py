"""Integration tests for POST /clean-v2 (cleaned document plus report)."""

import json

import httpx
import pytest_check as check
from httpx import AsyncClient

from tests.builders import make_docx, make_pdf, read_entries
from tests.stubs import CheckingServiceStub, lt_match

DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _report(bundle: bytes) -> dict:
    return json.loads(read_entries(bundle)["report.json"])


class TestReportBundleEndpoint:
    """Happy-path behavior of POST /clean-v2."""

    async def test_returns_zip_bundle(
        self, async_client: AsyncClient, sample_docx: bytes, checking_service: CheckingServiceStub
    ) -> None:
        checking_service.handler = lambda request, form: httpx.Response(
            200,
            json={
                "matches": [
                    lt_match("MORFOLOGIK_RULE_EN_US", "Possible typo", ["Hello"], "Helo world"),
                    lt_match(None, "Odd phrasing", [], "world, test"),
                ]
            },
        )

        response = await async_client.post(
            "/clean-v2",
            files={"file": ("contract.docx", sample_docx, DOCX_TYPE)},
            data={"lt_language": "en-US"},
        )

        assert response.status_code == 200
        check.equal(response.headers["content-type"], "application/zip")
        check.equal(
            response.headers["content-disposition"],
            'attachment; filename="contract_docsafe_report.zip"',
        )
        entries = read_entries(response.content)
        check.equal(
            sorted(entries), ["contract_cleaned.docx", "report.html", "report.json"]
        )

        report = _report(response.content)
        summary = report["summary"]
        check.equal(summary["fileName"], "contract_cleaned.docx")
        check.equal(summary["language"], "en-US")
        check.equal(summary["totalIssues"], 2)
        check.equal(summary["byRule"], {"MORFOLOGIK_RULE_EN_US": 1, "GENERIC": 1})
        check.equal(len(report["matches"]), 2)
        check.equal(report["matches"][0]["rule"]["category"], {"id": "TYPOS"})
        check.is_in(b"Helo world", entries["report.html"])

    async def test_checks_text_of_cleaned_document(
        self, async_client: AsyncClient, sample_docx: bytes, checking_service: CheckingServiceStub
    ) -> None:
        response = await async_client.post(
            "/clean-v2", files={"file": ("a.docx", sample_docx, DOCX_TYPE)}
        )

        assert response.status_code == 200
        assert checking_service.texts == ["Hello world, test\nSecond paragraph."]
        summary = _report(response.content)["summary"]
        check.equal(summary["textLength"], len("Hello world, test\nSecond paragraph."))
        check.equal(summary["totalIssues"], 0)

    async def test_language_defaults_to_auto(
        self, async_client: AsyncClient, sample_pdf: bytes, checking_service: CheckingServiceStub
    ) -> None:
        await async_client.post(
            "/clean-v2", files={"file": ("a.pdf", sample_pdf, "application/pdf")}
        )

        assert [form["language"] for form in checking_service.requests] == ["auto"]

    async def test_blank_language_falls_back_to_auto(
        self, async_client: AsyncClient, sample_pdf: bytes, checking_service: CheckingServiceStub
    ) -> None:
        await async_client.post(
            "/clean-v2",
            files={"file": ("a.pdf", sample_pdf, "application/pdf")},
            data={"lt_language": "   "},
        )

        assert checking_service.requests[0]["language"] == "auto"

    async def test_image_only_pdf_produces_empty_report(
        self, async_client: AsyncClient, checking_service: CheckingServiceStub
    ) -> None:
        """A PDF without a text layer yields a report without contacting the service."""
        scanned = make_pdf(["", ""])

        response = await async_client.post(
            "/clean-v2", files={"file": ("scan.pdf", scanned, "application/pdf")}
        )

        assert response.status_code == 200
        check.equal(checking_service.requests, [])
        report = _report(response.content)
        check.equal(report["summary"]["textLength"], 0)
        check.equal(report["summary"]["totalIssues"], 0)
        check.equal(report["matches"], [])


class TestReportBundleErrors:
    """Failures never return a partial bundle."""

    async def test_checking_service_timeout(
        self, async_client: AsyncClient, sample_docx: bytes, checking_service: CheckingServiceStub
    ) -> None:
        def timeout(request: httpx.Request, form: dict[str, str]) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        checking_service.handler = timeout

        response = await async_client.post(
            "/clean-v2", files={"file": ("a.docx", sample_docx, DOCX_TYPE)}
        )

        assert response.status_code == 502
        check.equal(response.headers["content-type"], "application/json")
        detail = response.json()["detail"]
        check.equal(detail["error"], "Processing failed")
        check.equal(detail["code"], "check_service_error")
        check.is_in("timed out", detail["message"])

    async def test_checking_service_http_error(
        self, async_client: AsyncClient, sample_docx: bytes, checking_service: CheckingServiceStub
    ) -> None:
        checking_service.handler = lambda request, form: httpx.Response(500, text="boom")

        response = await async_client.post(
            "/clean-v2", files={"file": ("a.docx", sample_docx, DOCX_TYPE)}
        )

        assert response.status_code == 502
        assert "HTTP 500" in response.json()["detail"]["message"]

    async def test_unsupported_format(
        self, async_client: AsyncClient, checking_service: CheckingServiceStub
    ) -> None:
        response = await async_client.post(
            "/clean-v2", files={"file": ("notes.txt", b"hello", "text/plain")}
        )

        assert response.status_code == 400
        check.equal(response.json()["detail"]["code"], "unsupported_format")
        check.equal(checking_service.requests, [])

    async def test_missing_file(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/clean-v2", data={"lt_language": "fr"})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "missing_file"

    async def test_malformed_docx(
        self, async_client: AsyncClient, checking_service: CheckingServiceStub
    ) -> None:
        response = await async_client.post(
            "/clean-v2", files={"file": ("broken.docx", b"PK not a zip", DOCX_TYPE)}
        )

        assert response.status_code == 422
        check.equal(response.json()["detail"]["code"], "malformed_document")
        check.equal(checking_service.requests, [])

    async def test_docx_without_text_is_checked_as_empty(
        self, async_client: AsyncClient, checking_service: CheckingServiceStub
    ) -> None:
        response = await async_client.post(
            "/clean-v2", files={"file": ("empty.docx", make_docx(paragraphs=[]), DOCX_TYPE)}
        )

        assert response.status_code == 200
        assert checking_service.requests == []
