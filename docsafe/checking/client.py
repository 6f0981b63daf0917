"""Grammar-check client for a LanguageTool-compatible HTTP API.

Long texts are cut into fixed-size chunks and checked one request at a
time, in order. The result is a fold over the chunks: either every
chunk's matches concatenated, or the first error.

Match offsets are left relative to their chunk. Reports only show the
context snippet, so they are not remapped onto the full text.
"""

import logging

import httpx
from pydantic import ValidationError

from docsafe.checking.config import CheckerConfig, get_checker_config
from docsafe.errors import CheckServiceError
from docsafe.models import CheckMatch, CheckResponse

logger = logging.getLogger(__name__)

AUTO_LANGUAGE = "auto"


def chunk_text(text: str, size: int) -> list[str]:
    """Slice text into consecutive chunks of at most ``size`` characters."""
    if size < 1:
        raise ValueError("chunk size must be positive")
    return [text[i : i + size] for i in range(0, len(text), size)]


class GrammarCheckClient:
    """Client for the external grammar-checking service.

    Each ``check`` call opens its own HTTP session, so one client instance
    can serve concurrent requests without sharing connection state.
    """

    def __init__(
        self,
        config: CheckerConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional checker configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to stub the service.
        """
        self._config = config or get_checker_config()
        self._transport = transport

    @property
    def config(self) -> CheckerConfig:
        return self._config

    async def check(self, text: str, language: str = AUTO_LANGUAGE) -> list[CheckMatch]:
        """Check a text and return all matches in chunk order.

        Args:
            text: Text to check.
            language: Language code, or "auto" for detection by the service.

        Returns:
            Matches from every chunk, concatenated. Empty for blank text,
            in which case no request is made.

        Raises:
            CheckServiceError: If any request fails, times out, or returns
                an unreadable body. No partial result is returned.
        """
        if not text or not text.strip():
            return []

        chunks = [c for c in chunk_text(text, self._config.chunk_size) if c.strip()]
        language = language or AUTO_LANGUAGE
        matches: list[CheckMatch] = []

        async with httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            transport=self._transport,
        ) as client:
            for index, chunk in enumerate(chunks):
                matches += await self._check_chunk(client, chunk, language, index)

        logger.info(f"Checked {len(text)} chars in {len(chunks)} chunk(s): {len(matches)} matches")
        return matches

    async def _check_chunk(
        self,
        client: httpx.AsyncClient,
        chunk: str,
        language: str,
        index: int,
    ) -> list[CheckMatch]:
        payload = {"text": chunk, "language": language}
        if self._config.api_key:
            payload["apiKey"] = self._config.api_key

        try:
            response = await client.post(self._config.api_url, data=payload)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise CheckServiceError(f"Checking service timed out on chunk {index + 1}") from e
        except httpx.HTTPStatusError as e:
            raise CheckServiceError(
                f"Checking service returned HTTP {e.response.status_code} on chunk {index + 1}"
            ) from e
        except httpx.HTTPError as e:
            raise CheckServiceError(f"Checking service request failed: {e}") from e

        try:
            body = CheckResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise CheckServiceError(f"Invalid checking service response: {e}") from e

        return body.matches or []


# Module-level singleton instance
_check_client: GrammarCheckClient | None = None


def get_check_client() -> GrammarCheckClient:
    """Get or create the global checking client.

    The client only holds its configuration, so sharing it across requests
    shares no mutable state.

    Returns:
        The GrammarCheckClient instance.
    """
    global _check_client
    if _check_client is None:
        _check_client = GrammarCheckClient()
    return _check_client
