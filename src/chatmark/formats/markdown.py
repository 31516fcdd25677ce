"""Canonical markdown renderer."""

from typing import Optional

from chatmark.formats.base import Renderer
from chatmark.formatting.ir import FormattedDocument
from chatmark.formatting.parser import MarkdownParser


class MarkdownRenderer(Renderer):
    """Re-emit a document in the canonical form of the chat dialect.

    Headings become `**Title:**`, bullets use `- ` and bold runs are
    wrapped in `**`, so the output parses back to the same blocks.
    """

    def __init__(self, parser: Optional[MarkdownParser] = None) -> None:
        self.parser = parser or MarkdownParser()

    @property
    def name(self) -> str:
        return "markdown"

    @property
    def file_suffix(self) -> str:
        return ".md"

    def render(self, document: FormattedDocument) -> str:
        return self.parser.to_markdown(document)
