"""
Unit tests for text normalization helpers.
"""

from resume_profile.core.text_normalization import (
    build_document,
    is_bullet_line,
    normalize_lines,
    strip_bullet,
)


class TestNormalizeLines:
    """Line splitting and trimming."""

    def test_trims_and_drops_blank_lines(self):
        assert normalize_lines("  JOHN SMITH \n\n\t john@x.com\n   \n") == ["JOHN SMITH", "john@x.com"]

    def test_handles_windows_line_endings(self):
        assert normalize_lines("a\r\nb\r\n") == ["a", "b"]

    def test_empty(self):
        assert normalize_lines("") == []

    def test_document_keeps_raw_text(self):
        doc = build_document("  A \n\nB")
        assert doc.text == "  A \n\nB"
        assert doc.lines == ["A", "B"]


class TestBullets:
    """Bullet glyph detection and stripping."""

    def test_glyphs(self):
        for glyph in ("•", "-", "●", "·", "◦"):
            assert is_bullet_line(f"{glyph} item")
        assert not is_bullet_line("item")

    def test_strip_single_glyph(self):
        assert strip_bullet("• Built internal tools.") == "Built internal tools."
        assert strip_bullet("-Led migration") == "Led migration"
        assert strip_bullet("Plain sentence") == "Plain sentence"

    def test_strip_only_leading_glyph(self):
        assert strip_bullet("- Real-time - messaging") == "Real-time - messaging"
