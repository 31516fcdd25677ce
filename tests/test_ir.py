"""Tests for the intermediate representation."""

import dataclasses

import pytest

from chatmark.formatting.ir import (
    BLOCK_TYPES,
    BulletPoint,
    FormattedDocument,
    Heading,
    Paragraph,
    TextRun,
    TextStyle,
)


class TestTextRun:
    """Tests for TextRun."""

    def test_default_style_is_normal(self):
        """Test a run is normal unless styled."""
        run = TextRun("x")

        assert run.style == TextStyle.NONE
        assert run.bold is False

    def test_bold(self):
        """Test the bold property."""
        assert TextRun("x", TextStyle.BOLD).bold is True

    def test_str(self):
        """Test str() gives the text."""
        assert str(TextRun("hello", TextStyle.BOLD)) == "hello"


class TestBlocks:
    """Tests for the block types."""

    def test_closed_set(self):
        """Test the exported block types."""
        assert BLOCK_TYPES == (Heading, BulletPoint, Paragraph)

    def test_types_are_distinct(self):
        """Test equal text in different block types is not equal."""
        assert Heading("a") != Paragraph("a")
        assert BulletPoint("a") != Paragraph("a")

    def test_runs_ignored_in_equality(self):
        """Test blocks compare by type and text."""
        assert Paragraph("a", runs=(TextRun("a"),)) == Paragraph("a")

    def test_immutable(self):
        """Test blocks cannot be changed in place."""
        block = Paragraph("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.text = "b"

    def test_plain_text_prefers_runs(self):
        """Test plain text is built from runs when present."""
        block = Paragraph(
            "a **b**",
            runs=(TextRun("a "), TextRun("b", TextStyle.BOLD)),
        )

        assert block.plain_text == "a b"
        assert str(block) == "a b"

    def test_plain_text_without_runs(self):
        """Test plain text falls back to the block text."""
        assert Heading("Title").plain_text == "Title"


class TestFormattedDocument:
    """Tests for FormattedDocument."""

    def test_empty(self):
        """Test a document without blocks."""
        doc = FormattedDocument()

        assert doc.is_empty
        assert doc.plain_text == ""
        assert list(doc) == []

    def test_headings(self):
        """Test heading extraction keeps order."""
        doc = FormattedDocument(
            blocks=(Heading("One"), Paragraph("x"), Heading("Two"))
        )

        assert doc.headings == ["One", "Two"]
        assert len(doc) == 3
