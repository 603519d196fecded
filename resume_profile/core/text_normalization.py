"""
Text normalization utilities shared by every extraction stage.

The raw text keeps the substring offsets the section locator needs; the
normalized line view is what the line-oriented parsers consume.
"""

import re
from typing import List, Tuple

from resume_profile.core.rules import BULLET_GLYPHS, glyph_class
from resume_profile.core.schemas import RawDocument


def normalize_lines(text: str) -> List[str]:
    """
    Split text into trimmed, non-empty lines, order preserved.

    Examples:
    - "  JOHN SMITH \\n\\n john@x.com" → ["JOHN SMITH", "john@x.com"]
    - "" → []
    """
    if not text:
        return []
    return [ln.strip() for ln in text.splitlines() if ln.strip()]


def build_document(text: str) -> RawDocument:
    return RawDocument(text=text or "", lines=normalize_lines(text))


def is_bullet_line(line: str, glyphs: Tuple[str, ...] = BULLET_GLYPHS) -> bool:
    """True when the line starts with a bullet glyph (•, -, ●, ·, ◦)."""
    return line.startswith(glyphs)


def strip_bullet(line: str, glyphs: Tuple[str, ...] = BULLET_GLYPHS) -> str:
    """
    Remove one leading bullet glyph and the whitespace after it.

    Examples:
    - "• Built internal tools." → "Built internal tools."
    - "-Led migration" → "Led migration"
    - "Plain sentence" → "Plain sentence"
    """
    return re.sub(rf"^{glyph_class(glyphs)}\s*", "", line.strip()).strip()


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())
