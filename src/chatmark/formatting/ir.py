"""Intermediate Representation for chat-assistant markdown.

This module defines the data structures that bridge the assistant's
streamed markdown to the renderers. Every structure is immutable and
rebuilt from scratch on each render pass.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag


class EmptyHeadingPolicy(str, Enum):
    """What to do with a heading line whose inner text is blank.

    DROP: emit nothing (keeps every block's text non-empty)
    PARAGRAPH: fall back to a paragraph holding the raw line
    KEEP: emit a heading with empty text
    """

    DROP = "drop"
    PARAGRAPH = "paragraph"
    KEEP = "keep"


class TextStyle(Flag):
    """Text styling flags."""

    NONE = 0
    BOLD = 1


@dataclass(frozen=True)
class TextRun:
    """A contiguous run of text with a single emphasis state.

    Attributes:
        text: The text content
        style: Style flags (NONE or BOLD)
    """

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Block:
    """Base for the closed set of block types.

    Attributes:
        text: The block's text with structural markers removed
        runs: Inline-formatted runs, filled in by the full parse pipeline
    """

    text: str
    runs: tuple[TextRun, ...] = field(default=(), compare=False, repr=False)

    @property
    def plain_text(self) -> str:
        """Get the text without emphasis markers."""
        if self.runs:
            return "".join(run.text for run in self.runs)
        return self.text

    def __str__(self) -> str:
        return self.plain_text


@dataclass(frozen=True)
class Heading(Block):
    """A `**Title:**` line, markers and trailing colon stripped."""


@dataclass(frozen=True)
class BulletPoint(Block):
    """A list item, bullet marker stripped."""


@dataclass(frozen=True)
class Paragraph(Block):
    """Any other non-blank line."""


BLOCK_TYPES: tuple[type[Block], ...] = (Heading, BulletPoint, Paragraph)


@dataclass(frozen=True)
class FormattedDocument:
    """A parsed response ready for rendering.

    Attributes:
        blocks: Blocks in top-to-bottom order
        source: The raw buffer this document was parsed from
    """

    blocks: tuple[Block, ...] = ()
    source: str = field(default="", compare=False, repr=False)

    @property
    def plain_text(self) -> str:
        """Get all text content without styling, one block per line."""
        return "\n".join(block.plain_text for block in self.blocks)

    @property
    def headings(self) -> list[str]:
        """Get the text of every heading, in order."""
        return [block.text for block in self.blocks if isinstance(block, Heading)]

    @property
    def is_empty(self) -> bool:
        """Check if the document has no blocks."""
        return not self.blocks

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)
