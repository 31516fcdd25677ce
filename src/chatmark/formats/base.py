"""Abstract base class for document renderers."""

from abc import ABC, abstractmethod
from pathlib import Path

from chatmark.formatting.ir import FormattedDocument


class Renderer(ABC):
    """Abstract base class for document renderers.

    Each renderer turns a FormattedDocument into one presentation.
    Presentation may add glyphs, spacing and styling but never changes
    the text content of a block.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the format name used on the command line (e.g., 'plain')."""
        ...

    @property
    def file_suffix(self) -> str:
        """Return the extension for files written by this renderer."""
        return ".txt"

    @abstractmethod
    def render(self, document: FormattedDocument) -> str:
        """Render a document to a string.

        Args:
            document: The parsed response

        Returns:
            The rendered text
        """
        ...

    def write(self, document: FormattedDocument, path: Path) -> None:
        """Render a document and write it to a file.

        Args:
            document: The parsed response
            path: Path to write the output
        """
        path.write_text(self.render(document), encoding="utf-8")
