"""Engagement heuristic deciding which issues are hot."""

from collections.abc import Iterable
from datetime import datetime, timedelta

from ..utils.date_parser import utc_now
from ..youtrack_client.models import YouTrackIssue

NEW_ISSUE_WINDOW = timedelta(days=15)


def is_hot(issue: YouTrackIssue, comment_threshold: int, now: datetime) -> bool:
    """Check whether an issue is hot.

    An issue is hot when it has more comments than the threshold, or when it
    was created within the last 15 days and has more than half the threshold
    (integer division) comments.
    """
    if issue.comments_count > comment_threshold:
        return True
    return (
        issue.created > now - NEW_ISSUE_WINDOW
        and issue.comments_count > comment_threshold // 2
    )


def classify_hot_issues(
    issues: Iterable[YouTrackIssue],
    comment_threshold: int,
    now: datetime | None = None,
) -> list[YouTrackIssue]:
    """Return the hot issues ranked by comment count, most discussed first.

    Issues with equal comment counts keep their fetch order.
    """
    now = now or utc_now()
    hot = [issue for issue in issues if is_hot(issue, comment_threshold, now)]
    return sorted(hot, key=lambda issue: issue.comments_count, reverse=True)
