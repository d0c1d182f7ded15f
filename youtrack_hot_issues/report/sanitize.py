"""Title sanitizers for the HTML report and for chat messages.

The two destinations need different treatment and the functions are kept
separate: the HTML report keeps non-ASCII text and only escapes angle
brackets, while chat titles end up inside a message payload and a
shell/JSON string and are reduced to printable ASCII.
"""

import json
import re

TITLE_MAX_LENGTH = 80
ELLIPSIS = "..."

_CHAT_QUOTES = ("“", "”", '"', "'")
_NON_PRINTABLE_ASCII = re.compile(r"[^\x20-\x7e]+")


def truncate(text: str, length: int = TITLE_MAX_LENGTH, marker: str = ELLIPSIS) -> str:
    """Cut ``text`` to at most ``length`` characters, ending with ``marker`` if cut.

    Example:
        >>> truncate("a" * 100)[-5:]
        "aa..."
    """
    if len(text) <= length:
        return text
    return text[: max(length - len(marker), 0)] + marker


def pluralize_comments(count: int) -> str:
    """Render a comment count as an English phrase ("1 comment", "3 comments")."""
    return f"{count} comment" if count == 1 else f"{count} comments"


def escape_markup_title(title: str) -> str:
    """Truncate a title and escape it for embedding in the HTML report."""
    return truncate(title).replace("<", "&lt;").replace(">", "&gt;")


def sanitize_chat_title(title: str) -> str:
    """Truncate a title and reduce it to a single printable-ASCII line.

    Quotes are dropped, backslashes become forward slashes and ``$`` is
    wrapped as ``'$'`` so the text survives shell interpolation. The result
    is then encoded as a JSON string body and anything outside printable
    ASCII is removed.
    """
    text = truncate(title)
    for quote in _CHAT_QUOTES:
        text = text.replace(quote, "")
    text = text.replace("\\", "/").replace("$", "'$'")
    text = json.dumps(text, ensure_ascii=False)[1:-1]
    return _NON_PRINTABLE_ASCII.sub("", text)
