"""Markdown parser for converting streamed assistant output to IR."""

import re
from typing import TYPE_CHECKING, Optional

from chatmark.formatting.ir import (
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

if TYPE_CHECKING:
    from chatmark.config import Settings


class MarkdownParser:
    """Parse the assistant's markdown subset into structured IR.

    The parser is stateless: every call re-reads the full buffer it is
    given, so a partially streamed response can be parsed as often as
    new text arrives.
    """

    # Whole-line heading: **Title** or **Title:** or **Title**:
    HEADING_PATTERN = re.compile(r"\*\*[^*]+\*\*:?")
    BOLD_PATTERN = re.compile(r"\*\*([^*]+?)\*\*")

    # Order matters: first matching prefix is stripped
    BULLET_PREFIXES = ("* ", "- ", "•")
    BULLET_MARKERS = ("* ", "- ", "• ")

    def __init__(
        self,
        sentinel: str = DEFAULT_SENTINEL,
        empty_heading: EmptyHeadingPolicy = EmptyHeadingPolicy.DROP,
    ) -> None:
        """Initialize the parser.

        Args:
            sentinel: Line-break placeholder used by the stream transport
            empty_heading: How to treat a heading with blank inner text
        """
        self.sentinel = sentinel
        self.empty_heading = EmptyHeadingPolicy(empty_heading)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MarkdownParser":
        """Build a parser from a chatmark Settings object."""
        return cls(sentinel=settings.sentinel, empty_heading=settings.empty_heading)

    def parse(self, raw_text: str) -> FormattedDocument:
        """Convert the current response buffer to a FormattedDocument.

        Args:
            raw_text: The full response text received so far

        Returns:
            FormattedDocument whose bullet and paragraph blocks carry runs
        """
        blocks: list[Block] = []

        for block in self.segment(self.normalize(raw_text)):
            if not isinstance(block, Heading):
                block = type(block)(block.text, runs=tuple(self.format_inline(block.text)))
            blocks.append(block)

        return FormattedDocument(blocks=tuple(blocks), source=raw_text)

    def normalize(self, raw_text: str) -> str:
        """Normalize line breaks using this parser's sentinel."""
        return normalize(raw_text, self.sentinel)

    def segment(self, normalized: str) -> list[Block]:
        """Split normalized text into typed blocks, one per non-blank line."""
        blocks: list[Block] = []

        for line in normalized.split("\n"):
            block = self._classify_line(line.strip())
            if block is not None:
                blocks.append(block)

        return blocks

    def _classify_line(self, line: str) -> Optional[Block]:
        """Classify a trimmed line. Returns None for lines that produce nothing."""
        if not line:
            return None

        if self.HEADING_PATTERN.fullmatch(line):
            return self._make_heading(line)

        if line.startswith(self.BULLET_PREFIXES):
            text = self._strip_bullet(line)
            if text:
                return BulletPoint(text)
            return None

        return Paragraph(line)

    def _make_heading(self, line: str) -> Optional[Block]:
        text = line[2:]
        if text.endswith(":"):
            text = text[:-1]
        text = text[:-2]
        if text.endswith(":"):
            text = text[:-1]
        text = text.strip()

        if text or self.empty_heading is EmptyHeadingPolicy.KEEP:
            return Heading(text)
        if self.empty_heading is EmptyHeadingPolicy.PARAGRAPH:
            return Paragraph(line)
        return None

    def _strip_bullet(self, line: str) -> str:
        for marker in self.BULLET_MARKERS:
            if line.startswith(marker):
                return line[len(marker):].strip()
        # A bare "•" glyph without a following space is kept
        return line.strip()

    def format_inline(self, text: str) -> list[TextRun]:
        """Split text into normal and bold runs.

        Only complete `**...**` pairs become bold; an unterminated marker
        is left in place as normal text.
        """
        runs: list[TextRun] = []
        pos = 0

        for match in self.BOLD_PATTERN.finditer(text):
            if match.start() > pos:
                runs.append(TextRun(text[pos:match.start()]))
            runs.append(TextRun(match.group(1), TextStyle.BOLD))
            pos = match.end()

        if pos < len(text) or not runs:
            runs.append(TextRun(text[pos:]))

        return runs

    def to_plain_text(self, doc: FormattedDocument) -> str:
        """Convert a FormattedDocument back to plain text."""
        return doc.plain_text

    def to_markdown(self, doc: FormattedDocument) -> str:
        """Convert a FormattedDocument back to the canonical dialect."""
        lines: list[str] = []

        for block in doc.blocks:
            if isinstance(block, Heading):
                lines.append(f"**{block.text}:**")
                continue

            runs = block.runs or tuple(self.format_inline(block.text))
            body = "".join(
                f"**{run.text}**" if run.bold else run.text for run in runs
            )
            if isinstance(block, BulletPoint):
                lines.append(f"- {body}")
            elif isinstance(block, Paragraph):
                lines.append(body)
            else:
                raise TypeError(f"Unknown block type: {type(block).__name__}")

        return "\n".join(lines)
