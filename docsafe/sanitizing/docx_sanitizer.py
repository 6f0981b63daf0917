"""DOCX metadata removal.

Works directly on the ZIP container:
    - core properties are blanked in place, tags kept
    - the custom properties part is dropped along with the references to it
    - text runs of the main document are normalized, markup untouched
    - every other entry is copied as is

Entry timestamps are reset to the ZIP epoch so the archive does not record
when it was processed.
"""

import io
import logging
import re
import zipfile
from xml.sax.saxutils import escape

from docsafe.errors import MalformedDocumentError
from docsafe.parsing.docx_parser import DOCUMENT_ENTRY, TEXT_RUN, decode_entities
from docsafe.parsing.normalizer import normalize_text

logger = logging.getLogger(__name__)

CORE_PROPERTIES_ENTRY = "docProps/core.xml"
CUSTOM_PROPERTIES_ENTRY = "docProps/custom.xml"
PACKAGE_RELATIONSHIPS_ENTRY = "_rels/.rels"
CONTENT_TYPES_ENTRY = "[Content_Types].xml"

ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

BLANKED_CORE_PROPERTIES = (
    "dc:creator",
    "cp:lastModifiedBy",
    "dc:title",
    "dc:subject",
    "cp:keywords",
)

_CUSTOM_RELATIONSHIP = re.compile(r"<Relationship\b[^>]*Target=\"/?docProps/custom\.xml\"[^>]*/>")
_CUSTOM_OVERRIDE = re.compile(r"<Override\b[^>]*PartName=\"/docProps/custom\.xml\"[^>]*/>")


def _blank_core_properties(core_xml: str) -> str:
    for tag in BLANKED_CORE_PROPERTIES:
        pattern = re.compile(rf"(<{tag}(?:\s[^>]*?)?(?<!/)>).*?(</{tag}>)", re.DOTALL)
        core_xml = pattern.sub(r"\1\2", core_xml)
    return core_xml


def _normalize_run(match: re.Match[str]) -> str:
    opening, inner, closing = match.groups()
    text = decode_entities(inner)
    core = normalize_text(text)
    # Keep one space at run edges so adjacent runs do not fuse
    leading = " " if text[:1].isspace() else ""
    trailing = " " if core and text[-1:].isspace() else ""
    return opening + escape(leading + core + trailing) + closing


def _normalize_runs(document_xml: str) -> str:
    return TEXT_RUN.sub(_normalize_run, document_xml)


def _drop_custom_references(name: str, xml: str) -> str:
    if name == PACKAGE_RELATIONSHIPS_ENTRY:
        return _CUSTOM_RELATIONSHIP.sub("", xml)
    return _CUSTOM_OVERRIDE.sub("", xml)


def sanitize_docx(file_content: bytes) -> bytes:
    """Rewrite a DOCX without identifying metadata.

    Args:
        file_content: Raw bytes of the DOCX file.

    Returns:
        Bytes of the cleaned DOCX.

    Raises:
        MalformedDocumentError: If the file is not a ZIP archive, lacks the
            main document entry, or an XML part is not UTF-8.
    """
    try:
        source = zipfile.ZipFile(io.BytesIO(file_content))
    except zipfile.BadZipFile as e:
        raise MalformedDocumentError(f"Invalid DOCX: {e}") from e

    output = io.BytesIO()
    with source, zipfile.ZipFile(output, "w", zipfile.ZIP_DEFLATED) as target:
        names = source.namelist()
        if DOCUMENT_ENTRY not in names:
            raise MalformedDocumentError(f"Invalid DOCX: missing {DOCUMENT_ENTRY}")
        has_custom = CUSTOM_PROPERTIES_ENTRY in names

        for info in source.infolist():
            name = info.filename
            if name == CUSTOM_PROPERTIES_ENTRY:
                logger.debug("Dropping custom properties part")
                continue

            try:
                data = source.read(info)
                if name == CORE_PROPERTIES_ENTRY:
                    data = _blank_core_properties(data.decode("utf-8")).encode("utf-8")
                elif name == DOCUMENT_ENTRY:
                    data = _normalize_runs(data.decode("utf-8")).encode("utf-8")
                elif has_custom and name in (PACKAGE_RELATIONSHIPS_ENTRY, CONTENT_TYPES_ENTRY):
                    data = _drop_custom_references(name, data.decode("utf-8")).encode("utf-8")
            except (zipfile.BadZipFile, UnicodeDecodeError, OSError) as e:
                raise MalformedDocumentError(f"Invalid DOCX entry {name}: {e}") from e

            entry = zipfile.ZipInfo(name, date_time=ZIP_EPOCH)
            entry.compress_type = zipfile.ZIP_DEFLATED
            entry.external_attr = info.external_attr
            target.writestr(entry, data)

    return output.getvalue()
