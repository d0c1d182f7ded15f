"""Turn hot issues into report lines."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..youtrack_client.models import YouTrackIssue
from .builder import ReportBuilder
from .sanitize import escape_markup_title, pluralize_comments, sanitize_chat_title


@dataclass(frozen=True)
class ReportEntry:
    """One issue as it appears in a report."""

    id: str
    url: str
    title: str
    comments: str

    @classmethod
    def from_issue(
        cls,
        issue: YouTrackIssue,
        host_url: str,
        sanitize: Callable[[str], str],
    ) -> "ReportEntry":
        return cls(
            id=issue.id,
            url=f"{host_url}issue/{issue.id}",
            title=sanitize(issue.summary),
            comments=pluralize_comments(issue.comments_count),
        )

    def to_plain(self) -> str:
        return f"{self.id} {self.title} / {self.comments}"

    def to_html(self) -> str:
        return (
            f'<a target="_blank" href="{self.url}">{self.id}</a> '
            f"{self.title} / <b>{self.comments}</b>"
        )

    def to_chat(self) -> str:
        return f"<{self.url}|{self.id}> {self.title} / {self.comments}"


def aggregate_hot_issues(
    issues: Iterable[YouTrackIssue], host_url: str
) -> ReportBuilder:
    """Build the full hot issue list for the plain-text and HTML reports."""
    builder = ReportBuilder()
    for issue in issues:
        entry = ReportEntry.from_issue(issue, host_url, escape_markup_title)
        builder.append_line(entry.to_plain(), entry.to_html())
    return builder


def aggregate_top_issues(issues: Iterable[YouTrackIssue], host_url: str) -> list[str]:
    """Build chat-message lines (``<url|id> title / N comments``) for top issues."""
    return [
        ReportEntry.from_issue(issue, host_url, sanitize_chat_title).to_chat()
        for issue in issues
    ]
