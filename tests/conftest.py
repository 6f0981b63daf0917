"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - sample_pdf / sample_docx: Generated documents carrying metadata
    - checking_service: Recording stub of the LanguageTool API
    - checker: GrammarCheckClient wired to the stub
    - async_client: HTTPX client for API testing

The checking service is never contacted over the network.
"""

from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from docsafe.api.app import create_app
from docsafe.api.config import ApiConfig
from docsafe.checking import CheckerConfig, GrammarCheckClient, get_check_client
from tests.builders import SAMPLE_PDF_INFO, make_docx, make_pdf
from tests.stubs import CheckingServiceStub

CHECK_URL = "https://lt.test/v2/check"


@pytest.fixture
def sample_pdf() -> bytes:
    """Two-page PDF with a fully populated information dictionary."""
    return make_pdf(["Hello  world ,test", "Second page text."], info=SAMPLE_PDF_INFO)


@pytest.fixture
def sample_docx() -> bytes:
    """DOCX with core and custom properties."""
    return make_docx(
        paragraphs=[["Hello  world ,test"], ["Second", "paragraph."]],
        custom=True,
    )


@pytest.fixture
def checking_service() -> CheckingServiceStub:
    return CheckingServiceStub()


@pytest.fixture
def checker_config() -> CheckerConfig:
    return CheckerConfig(api_url=CHECK_URL, api_key=None, timeout_seconds=5, chunk_size=20_000)


@pytest.fixture
def checker(
    checker_config: CheckerConfig, checking_service: CheckingServiceStub
) -> GrammarCheckClient:
    return GrammarCheckClient(checker_config, transport=httpx.MockTransport(checking_service))


@pytest.fixture
def api_config() -> ApiConfig:
    return ApiConfig(allowed_origins=[], max_upload_size=20 * 1024 * 1024)


@pytest.fixture
async def async_client(
    api_config: ApiConfig, checker: GrammarCheckClient
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        AsyncClient bound to a fresh app whose checking client uses the stub.
    """
    app = create_app(api_config)
    app.dependency_overrides[get_check_client] = lambda: checker
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
