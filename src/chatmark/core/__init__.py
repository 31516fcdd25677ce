"""Streaming support for chatmark."""

from chatmark.core.sse import iter_sse_chunks, read_sse_transcript, replay
from chatmark.core.stream import StreamClosedError, StreamSession

__all__ = [
    "StreamSession",
    "StreamClosedError",
    "iter_sse_chunks",
    "read_sse_transcript",
    "replay",
]
