"""Line-break normalization for streamed assistant text."""

DEFAULT_SENTINEL = "★"


def normalize(raw: str, sentinel: str = DEFAULT_SENTINEL) -> str:
    """Collapse every line-break variant into a single LF.

    The stream transport trims each event payload, so the assistant encodes
    line breaks as a sentinel character. Replacements run in a fixed order:
    CRLF, lone CR, sentinel after a colon, then any remaining sentinel.

    Args:
        raw: The accumulated response buffer
        sentinel: The single-character line-break placeholder

    Returns:
        Text whose only line separator is LF
    """
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    if not sentinel:
        return text
    text = text.replace(":" + sentinel, ":\n")
    return text.replace(sentinel, "\n")
