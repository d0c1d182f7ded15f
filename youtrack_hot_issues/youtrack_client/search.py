"""YouTrack search functionality and query building."""

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from rich.console import Console

from ..utils.date_parser import utc_now
from .models import YouTrackIssue

if TYPE_CHECKING:
    from .client import YouTrackClient

console = Console()

SEARCH_FILTER = "#Unresolved Assignee: Unassigned order by: updated"
RECENCY_WINDOW = timedelta(days=7)
PAGE_SIZE = 100
MAX_PAGES = 20
TAGGED_LIMIT = 100


def build_project_filter(search_condition: str | None) -> str:
    """Build the project filter from the base predicate and a free-text condition.

    Example:
        >>> build_project_filter("Subsystem: Debugger")
        "#Unresolved Assignee: Unassigned order by: updated Subsystem: Debugger"
    """
    return f"{SEARCH_FILTER} {search_condition or ''}".rstrip()


def quote_tag(tag: str) -> str:
    """Quote a tag name for YouTrack queries and commands.

    Tag names containing whitespace must be wrapped in braces.

    Example:
        >>> quote_tag("hot issue")
        "{hot issue}"
    """
    if any(ch.isspace() for ch in tag):
        return f"{{{tag}}}"
    return tag


def build_tag_query(tag: str) -> str:
    """Build a query for issues carrying ``tag``.

    Example:
        >>> build_tag_query("hot issue")
        "tag: {hot issue}"
    """
    return f"tag: {quote_tag(tag)}"


class IssueFetcher:
    """High-level interface for retrieving triage candidates."""

    def __init__(self, client: "YouTrackClient", project: str):
        """Initialize fetcher with YouTrack client.

        Args:
            client: Authenticated YouTrackClient instance
            project: Short name of the project to scan
        """
        self.client = client
        self.project = project

    async def fetch_tagged(self, tag: str) -> list[YouTrackIssue]:
        """Fetch issues currently carrying the marker tag (at most 100)."""
        issues = await self.client.fetch_by_tag(build_tag_query(tag), TAGGED_LIMIT)
        console.print(f"🏷️  Found {len(issues)} issues tagged '{tag}'", markup=False)
        return issues

    async def fetch_project_issues(
        self,
        search_condition: str | None,
        recency_window: timedelta = RECENCY_WINDOW,
        now: datetime | None = None,
    ) -> list[YouTrackIssue]:
        """Fetch unresolved, unassigned project issues updated recently.

        Pages are requested one after another; all MAX_PAGES pages are always
        requested, capping a run at MAX_PAGES * PAGE_SIZE issues. An issue
        seen on more than one page is kept once, at its first position.

        Args:
            search_condition: Free-text YouTrack query appended to the base filter
            recency_window: Only issues updated within this window are fetched
            now: Reference time (defaults to current UTC time)

        Returns:
            List of YouTrackIssue objects in fetch order
        """
        search_filter = build_project_filter(search_condition)
        updated_after = (now or utc_now()) - recency_window

        issues: list[YouTrackIssue] = []
        seen: set[str] = set()
        for page in range(MAX_PAGES):
            batch = await self.client.fetch_by_project(
                self.project,
                search_filter,
                offset=page * PAGE_SIZE,
                limit=PAGE_SIZE,
                updated_after=updated_after,
            )
            for issue in batch:
                if issue.id not in seen:
                    seen.add(issue.id)
                    issues.append(issue)

        console.print(f"✅ Found {len(issues)} issues in {self.project}")
        return issues
