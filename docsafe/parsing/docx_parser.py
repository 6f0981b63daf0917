"""DOCX text extraction.

Reads ``word/document.xml`` straight from the ZIP container and pulls the
text of every ``<w:t>`` run. Runs are joined with a space, paragraphs
with a newline.
"""

import io
import logging
import re
import sys
import zipfile

from docsafe.parsing.normalizer import normalize_text

logger = logging.getLogger(__name__)

DOCUMENT_ENTRY = "word/document.xml"

# <w:t> and <w:t xml:space="preserve">, but not <w:tab/>, <w:tbl> or <w:t/>
TEXT_RUN = re.compile(r"(<w:t(?:\s[^>]*?)?(?<!/)>)(.*?)(</w:t>)", re.DOTALL)
_RUN_OR_PARAGRAPH_END = re.compile(
    r"<w:t(?:\s[^>]*?)?(?<!/)>(?P<text>.*?)</w:t>|(?P<end></w:p>)", re.DOTALL
)

_XML_ENTITIES = {"amp": "&", "lt": "<", "gt": ">", "quot": '"', "apos": "'"}
_REFERENCE = re.compile(
    r"&(?:#x(?P<hex>[0-9A-Fa-f]+)|#(?P<dec>[0-9]+)|(?P<name>amp|lt|gt|quot|apos));"
)


def _decode_reference(match: re.Match[str]) -> str:
    if match.group("name"):
        return _XML_ENTITIES[match.group("name")]
    if match.group("hex"):
        codepoint = int(match.group("hex"), 16)
    else:
        codepoint = int(match.group("dec"))
    if codepoint > sys.maxunicode:
        return match.group(0)
    return chr(codepoint)


def decode_entities(text: str) -> str:
    """Decode predefined entities and numeric character references.

    Single pass, so ``&amp;#233;`` decodes to the literal ``&#233;``.
    """
    return _REFERENCE.sub(_decode_reference, text)


def _paragraphs(document_xml: str) -> list[str]:
    paragraphs: list[str] = []
    runs: list[str] = []
    for match in _RUN_OR_PARAGRAPH_END.finditer(document_xml):
        if match.group("end") is not None:
            paragraphs.append(" ".join(runs))
            runs = []
        else:
            runs.append(decode_entities(match.group("text")))
    if runs:
        paragraphs.append(" ".join(runs))
    return paragraphs


def extract_docx_text(file_content: bytes) -> str:
    """Extract normalized text from a DOCX file.

    Never raises: a missing document entry or an unreadable archive yields
    an empty string.

    Args:
        file_content: Raw bytes of the DOCX file.

    Returns:
        Normalized visible text.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(file_content)) as archive:
            if DOCUMENT_ENTRY not in archive.namelist():
                logger.warning(f"DOCX has no {DOCUMENT_ENTRY} entry")
                return ""
            document_xml = archive.read(DOCUMENT_ENTRY).decode("utf-8")
    except (zipfile.BadZipFile, UnicodeDecodeError, OSError) as e:
        logger.warning(f"DOCX text extraction failed: {e}")
        return ""

    return normalize_text("\n".join(_paragraphs(document_xml)))
