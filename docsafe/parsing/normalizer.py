"""Whitespace and punctuation spacing normalization.

Used on extracted text before it is sent to the checking service, and on
DOCX text runs during sanitization. The transform is idempotent.
"""

import re

_ZERO_WIDTH_SPACE = re.compile("\u200b")
_HORIZONTAL_WHITESPACE = re.compile(r"[ \t]+")
_SPACES_AROUND_NEWLINE = re.compile(r" *\n *")
_PUNCTUATION_SPACING = re.compile(r" ?([,;:!?]) ?")
_SPACE_BEFORE_PERIOD = re.compile(r" \.")
_MULTIPLE_SPACES = re.compile(r" {2,}")


def normalize_text(text: str) -> str:
    """Canonicalize whitespace and punctuation spacing.

    Rules, applied in order:
        1. Remove zero-width spaces.
        2. Collapse runs of spaces/tabs to one space.
        3. Drop spaces around newlines.
        4. One space after , ; : ! ? and none before.
        5. No space before a period.
        6. Collapse any remaining multi-space runs.
        7. Trim the whole string.

    Args:
        text: Raw text.

    Returns:
        Normalized text.
    """
    if not text:
        return text
    text = _ZERO_WIDTH_SPACE.sub("", text)
    text = _HORIZONTAL_WHITESPACE.sub(" ", text)
    text = _SPACES_AROUND_NEWLINE.sub("\n", text)
    text = _PUNCTUATION_SPACING.sub(r"\1 ", text)
    text = _SPACE_BEFORE_PERIOD.sub(".", text)
    text = _MULTIPLE_SPACES.sub(" ", text)
    return text.strip()
