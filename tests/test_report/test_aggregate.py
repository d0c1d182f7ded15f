"""Tests for report aggregation."""

from collections.abc import Callable

from youtrack_hot_issues.report.aggregate import (
    ReportEntry,
    aggregate_hot_issues,
    aggregate_top_issues,
)
from youtrack_hot_issues.report.sanitize import escape_markup_title
from youtrack_hot_issues.youtrack_client.models import YouTrackIssue

IssueFactory = Callable[..., YouTrackIssue]

HOST = "https://yt.example.com/"


class TestReportEntry:
    """Test ReportEntry rendering."""

    def test_from_issue(self, make_issue: IssueFactory) -> None:
        """Test entries carry the absolute URL and pluralized comments."""
        issue = make_issue("DEXP-7", comments=1, summary="a <b>")
        entry = ReportEntry.from_issue(issue, HOST, escape_markup_title)

        assert entry.url == "https://yt.example.com/issue/DEXP-7"
        assert entry.title == "a &lt;b&gt;"
        assert entry.comments == "1 comment"
        assert entry.to_plain() == "DEXP-7 a &lt;b&gt; / 1 comment"
        assert entry.to_html() == (
            '<a target="_blank" href="https://yt.example.com/issue/DEXP-7">DEXP-7</a>'
            " a &lt;b&gt; / <b>1 comment</b>"
        )


class TestAggregation:
    """Test full and top-N aggregation."""

    def test_hot_issues_in_given_order(self, make_issue: IssueFactory) -> None:
        """Test one paired line per issue, in the given order."""
        issues = [
            make_issue("DEXP-2", comments=12, summary="Second"),
            make_issue("DEXP-1", comments=3, summary="First"),
        ]

        builder = aggregate_hot_issues(issues, HOST)

        assert builder.to_plain_text().splitlines() == [
            "DEXP-2 Second / 12 comments",
            "DEXP-1 First / 3 comments",
        ]
        assert builder.line_count == 2

    def test_top_issues_chat_format(self, make_issue: IssueFactory) -> None:
        """Test chat lines use link syntax and the chat sanitizer."""
        issues = [make_issue("DEXP-5", comments=2, summary='Say "hi" to Ünïcode')]

        assert aggregate_top_issues(issues, HOST) == [
            "<https://yt.example.com/issue/DEXP-5|DEXP-5> Say hi to ncode / 2 comments"
        ]

    def test_empty(self) -> None:
        """Test no issues produce no lines."""
        assert aggregate_hot_issues([], HOST).line_count == 0
        assert aggregate_top_issues([], HOST) == []
