"""Parallel plain-text / HTML report accumulation."""

from html import escape


def _single_line(text: str) -> str:
    # One entry must render as exactly one non-empty line in both buffers.
    return " ".join(text.splitlines()) or " "


class ReportBuilder:
    """Accumulates a report as two line buffers kept in lock-step.

    Every append writes exactly one entry to the plain-text buffer and one to
    the markup buffer, so both renderings always describe the same lines in
    the same order.
    """

    def __init__(self) -> None:
        self._plain: list[str] = []
        self._markup: list[str] = []

    def _append(self, plain: str, markup: str) -> None:
        self._plain.append(_single_line(plain))
        self._markup.append(_single_line(markup))

    def append_header(self, title: str) -> None:
        """Append a section header."""
        self._append(f"=== {title} ===", f"<h3>{escape(title)}</h3>")

    def append_key_value(self, key: str, value: str) -> None:
        """Append a statistics line."""
        self._append(f"{key}: {value}", f"<b>{escape(key)}</b>: {escape(value)}<br/>")

    def append_line(self, plain: str, markup: str) -> None:
        """Append a line given in both renderings.

        The markup text is taken as-is; callers are responsible for escaping it.
        """
        self._append(plain, f"{markup}<br/>")

    def extend(self, other: "ReportBuilder") -> None:
        """Append every line of another builder, keeping its pairing."""
        self._plain.extend(other._plain)
        self._markup.extend(other._markup)

    @property
    def line_count(self) -> int:
        """Number of report lines (identical for both renderings)."""
        return len(self._plain)

    def to_plain_text(self) -> str:
        """Render the accumulated report as plain text."""
        return "\n".join(self._plain)

    def to_html(self) -> str:
        """Render the accumulated report as HTML."""
        return "\n".join(self._markup)
