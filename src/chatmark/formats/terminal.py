"""Terminal renderer built on rich."""

from io import StringIO
from typing import Optional

from rich.console import Console, Group
from rich.text import Text

from chatmark.formats.base import Renderer
from chatmark.formatting.ir import (
    Block,
    BulletPoint,
    FormattedDocument,
    Heading,
    Paragraph,
)


class RichRenderer(Renderer):
    """Render a document as styled rich Text renderables.

    Headings are bold with a blank line before them, bullet points are
    indented behind the bullet glyph, and bold runs keep their style.
    """

    BULLET_INDENT = "  "

    def __init__(
        self,
        bullet_glyph: Optional[str] = None,
        heading_style: str = "bold",
        bold_style: str = "bold",
        width: int = 80,
    ) -> None:
        self.bullet_glyph = bullet_glyph or "•"
        self.heading_style = heading_style
        self.bold_style = bold_style
        self.width = width

    @property
    def name(self) -> str:
        return "rich"

    def renderable(self, document: FormattedDocument) -> Group:
        """Build a rich Group for a document, e.g. for a Live display."""
        lines: list[Text] = []

        for block in document.blocks:
            if isinstance(block, Heading):
                if lines:
                    lines.append(Text())
                lines.append(Text(block.text, style=self.heading_style))
            elif isinstance(block, BulletPoint):
                line = Text(f"{self.BULLET_INDENT}{self.bullet_glyph} ")
                line.append_text(self._inline(block))
                lines.append(line)
            elif isinstance(block, Paragraph):
                lines.append(self._inline(block))
            else:
                raise TypeError(f"Unknown block type: {type(block).__name__}")

        return Group(*lines)

    def _inline(self, block: Block) -> Text:
        text = Text()
        if not block.runs:
            text.append(block.text)
            return text
        for run in block.runs:
            text.append(run.text, style=self.bold_style if run.bold else None)
        return text

    def render(self, document: FormattedDocument) -> str:
        """Render to plain text through a recording console."""
        console = Console(
            file=StringIO(),
            record=True,
            width=self.width,
            color_system=None,
        )
        console.print(self.renderable(document), soft_wrap=True)
        return console.export_text().rstrip("\n")
