"""Read recorded server-sent event transcripts of assistant responses.

The assistant streams `text/event-stream` where each `data:` line carries
one chunk of the answer. Payloads are trimmed in transit, which is why
line breaks inside an answer travel as the sentinel character.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from chatmark.core.stream import StreamSession
from chatmark.formatting.ir import FormattedDocument

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_MARKER = "[DONE]"


def iter_sse_chunks(lines: Iterable[str]) -> Iterator[str]:
    """Yield the payload of every `data:` line.

    Empty payloads and the `[DONE]` marker are skipped, as are comments,
    `event:` fields and blank separator lines.
    """
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.startswith(DATA_PREFIX):
            continue

        content = line[len(DATA_PREFIX):].strip()
        if not content or content == DONE_MARKER:
            continue

        yield content


def read_sse_transcript(path: Path) -> list[str]:
    """Read all chunks from a transcript file."""
    with path.open(encoding="utf-8") as f:
        chunks = list(iter_sse_chunks(f))
    logger.debug("read %d chunks from %s", len(chunks), path)
    return chunks


def replay(
    chunks: Iterable[str],
    session: Optional[StreamSession] = None,
) -> Iterator[FormattedDocument]:
    """Feed chunks through a session, yielding every intermediate render.

    The session is closed once the chunks run out or the consumer stops.
    """
    session = session or StreamSession()
    try:
        for chunk in chunks:
            yield session.feed(chunk)
    finally:
        session.close()
