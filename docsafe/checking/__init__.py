"""Client for the external grammar-checking service.

Responsibilities:
    - Chunking extracted text into bounded requests
    - Sequential dispatch with a per-request timeout
    - Aggregating matches in chunk order

Configuration comes from CheckerConfig and is injected at construction.
"""

from docsafe.checking.client import AUTO_LANGUAGE, GrammarCheckClient, chunk_text, get_check_client
from docsafe.checking.config import CheckerConfig, get_checker_config

__all__ = [
    "AUTO_LANGUAGE",
    "CheckerConfig",
    "GrammarCheckClient",
    "chunk_text",
    "get_check_client",
    "get_checker_config",
]
