"""Parsing of the assistant's markdown subset into structured IR."""

from chatmark.formatting.ir import (
    BLOCK_TYPES,
    Block,
    BulletPoint,
    EmptyHeadingPolicy,
    FormattedDocument,
    Heading,
    Paragraph,
    TextRun,
    TextStyle,
)
from chatmark.formatting.normalizer import DEFAULT_SENTINEL, normalize
from chatmark.formatting.parser import MarkdownParser


def segment(normalized: str) -> list[Block]:
    """Split normalized text into blocks with the default parser."""
    return MarkdownParser().segment(normalized)


def format_inline(text: str) -> list[TextRun]:
    """Split text into normal and bold runs with the default parser."""
    return MarkdownParser().format_inline(text)


def parse(raw_text: str) -> FormattedDocument:
    """Parse a raw response buffer with the default parser."""
    return MarkdownParser().parse(raw_text)


__all__ = [
    "BLOCK_TYPES",
    "Block",
    "BulletPoint",
    "EmptyHeadingPolicy",
    "FormattedDocument",
    "Heading",
    "Paragraph",
    "TextRun",
    "TextStyle",
    "DEFAULT_SENTINEL",
    "MarkdownParser",
    "normalize",
    "segment",
    "format_inline",
    "parse",
]
