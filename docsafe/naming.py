"""Output filename derivation for cleaned documents and report bundles."""

import re
from pathlib import PurePath

from docsafe.models import DocumentFormat

MAX_STEM_LENGTH = 100
FALLBACK_STEM = "document"

_KNOWN_EXTENSION = re.compile(r"\.(pdf|docx)$", re.IGNORECASE)
_UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9._-]")


def safe_stem(filename: str) -> str:
    """Reduce an uploaded filename to a safe stem without extension.

    Directory components are dropped (both separators), the .pdf/.docx
    extension is removed, characters outside ``[A-Za-z0-9._-]`` become
    underscores and the result is capped at MAX_STEM_LENGTH.
    """
    name = PurePath(filename.replace("\\", "/")).name
    stem = _KNOWN_EXTENSION.sub("", name)
    stem = _UNSAFE_CHARACTERS.sub("_", stem)[:MAX_STEM_LENGTH].strip(".")
    return stem or FALLBACK_STEM


def cleaned_filename(filename: str, fmt: DocumentFormat) -> str:
    """``report 2024.docx`` -> ``report_2024_cleaned.docx``."""
    return f"{safe_stem(filename)}_cleaned{fmt.extension}"


def bundle_filename(filename: str) -> str:
    """``report.pdf`` -> ``report_docsafe_report.zip``."""
    return f"{safe_stem(filename)}_docsafe_report.zip"
