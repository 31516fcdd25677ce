"""Plain text renderer."""

from typing import Optional

from chatmark.formats.base import Renderer
from chatmark.formatting.ir import (
    BulletPoint,
    FormattedDocument,
    Heading,
    Paragraph,
)


class PlainTextRenderer(Renderer):
    """Render a document as unstyled text.

    - Headings stand on their own line, separated from earlier content
      by a blank line
    - Bullet points are prefixed with the bullet glyph
    - Bold runs lose their markers
    """

    def __init__(self, bullet_glyph: Optional[str] = None) -> None:
        self.bullet_glyph = bullet_glyph or "•"

    @property
    def name(self) -> str:
        return "plain"

    def render(self, document: FormattedDocument) -> str:
        lines: list[str] = []

        for block in document.blocks:
            if isinstance(block, Heading):
                if lines:
                    lines.append("")
                lines.append(block.text)
            elif isinstance(block, BulletPoint):
                lines.append(f"{self.bullet_glyph} {block.plain_text}")
            elif isinstance(block, Paragraph):
                lines.append(block.plain_text)
            else:
                raise TypeError(f"Unknown block type: {type(block).__name__}")

        return "\n".join(lines)
