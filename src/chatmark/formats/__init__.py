"""Renderers that present parsed responses."""

from typing import Optional

from chatmark.formats.base import Renderer
from chatmark.formats.markdown import MarkdownRenderer
from chatmark.formats.plain import PlainTextRenderer
from chatmark.formats.terminal import RichRenderer

__all__ = [
    "Renderer",
    "MarkdownRenderer",
    "PlainTextRenderer",
    "RichRenderer",
    "RENDERER_MAP",
    "SUPPORTED_FORMATS",
    "get_renderer",
]

# Map format names to renderers
RENDERER_MAP: dict[str, type[Renderer]] = {
    "rich": RichRenderer,
    "plain": PlainTextRenderer,
    "markdown": MarkdownRenderer,
}

SUPPORTED_FORMATS = tuple(RENDERER_MAP.keys())


def get_renderer(name: str, bullet_glyph: Optional[str] = None) -> Renderer:
    """Create the renderer registered under a format name."""
    key = name.lower()
    if key not in RENDERER_MAP:
        raise ValueError(
            f"Unsupported output format: {name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    renderer_class = RENDERER_MAP[key]
    if renderer_class is MarkdownRenderer:
        return renderer_class()
    return renderer_class(bullet_glyph=bullet_glyph)
