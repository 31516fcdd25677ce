"""Accumulate a streamed response and re-render it on every chunk."""

import logging
from typing import Optional

from chatmark.formatting.ir import FormattedDocument
from chatmark.formatting.parser import MarkdownParser

logger = logging.getLogger(__name__)


class StreamClosedError(Exception):
    """A chunk was fed to a session that has already been closed."""

    pass


class StreamSession:
    """Holds the text of one streamed assistant response.

    Each chunk is appended to the buffer and the whole buffer is parsed
    again. Nothing from an earlier render is reused, so a render is only
    ever superseded by a newer one built from more text.
    """

    def __init__(self, parser: Optional[MarkdownParser] = None) -> None:
        self.parser = parser or MarkdownParser()
        self._buffer = ""
        self._chunk_count = 0
        self._closed = False
        self._document = FormattedDocument()

    @property
    def buffer(self) -> str:
        """The full text received so far."""
        return self._buffer

    @property
    def document(self) -> FormattedDocument:
        """The latest render."""
        return self._document

    @property
    def chunk_count(self) -> int:
        return self._chunk_count

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def is_typing(self) -> bool:
        """True while the session is open and nothing visible has arrived."""
        return not self._closed and not self._buffer.strip()

    def feed(self, chunk: str) -> FormattedDocument:
        """Append a chunk and re-render the full buffer.

        Args:
            chunk: The next piece of the response

        Returns:
            The document parsed from the whole buffer

        Raises:
            StreamClosedError: If the session was closed
        """
        if self._closed:
            raise StreamClosedError("Cannot feed a closed stream session")

        self._buffer += chunk
        self._chunk_count += 1
        self._document = self.parser.parse(self._buffer)
        logger.debug(
            "chunk %d: %d chars buffered, %d blocks",
            self._chunk_count,
            len(self._buffer),
            len(self._document),
        )
        return self._document

    def close(self) -> FormattedDocument:
        """Finish the stream and return the final render."""
        if not self._closed:
            self._closed = True
            self._document = self.parser.parse(self._buffer)
            logger.debug(
                "stream closed after %d chunks, %d blocks",
                self._chunk_count,
                len(self._document),
            )
        return self._document

    def reset(self) -> None:
        """Clear the buffer and reopen the session."""
        self._buffer = ""
        self._chunk_count = 0
        self._closed = False
        self._document = FormattedDocument()
