"""Test configuration and fixtures."""

import os

# Render CLI help deterministically: wide enough that option names are not
# truncated, and as plain text regardless of FORCE_COLOR.
os.environ.setdefault("COLUMNS", "200")
os.environ.setdefault("TTY_COMPATIBLE", "0")

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from youtrack_hot_issues.youtrack_client.models import YouTrackIssue

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

IssueFactory = Callable[..., YouTrackIssue]


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for recency rules."""
    return NOW


@pytest.fixture
def make_issue() -> IssueFactory:
    """Factory for issues created long enough ago to not count as new."""

    def _make(
        issue_id: str,
        comments: int = 0,
        age_days: float = 30,
        summary: str | None = None,
        tags: list[str] | None = None,
    ) -> YouTrackIssue:
        return YouTrackIssue(
            id=issue_id,
            summary=summary if summary is not None else f"Issue {issue_id}",
            comments_count=comments,
            created=NOW - timedelta(days=age_days),
            tags=tags or [],
        )

    return _make
