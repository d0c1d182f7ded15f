"""YouTrack REST API client using httpx."""

import logging
import os
from datetime import datetime
from types import TracebackType
from typing import Any

import httpx

from ..utils.date_parser import format_datetime_for_youtrack, from_epoch_millis
from .models import YouTrackIssue

logger = logging.getLogger(__name__)

ISSUE_FIELDS = "idReadable,summary,commentsCount,created,tags(name)"


class YouTrackError(Exception):
    """Raised when YouTrack rejects a request (non-auth HTTP error)."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"YouTrack request failed ({status_code}): {message}")
        self.status_code = status_code
        self.message = message


class YouTrackConnectionError(Exception):
    """Raised when YouTrack can't be reached or refuses our credentials."""


class YouTrackClient:
    """Async YouTrack API client with bearer token authentication."""

    def __init__(
        self,
        host_url: str,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize YouTrack client with authentication.

        Args:
            host_url: Base URL of the YouTrack instance, e.g.
                https://youtrack.example.com/
            token: Permanent token. If None, reads from YOUTRACK_TOKEN env var.
            transport: Optional httpx transport (used by tests)
        """
        self.token = token or os.getenv("YOUTRACK_TOKEN")
        if not self.token:
            raise ValueError(
                "YouTrack token is required. Set YOUTRACK_TOKEN environment variable."
            )

        self.host_url = host_url if host_url.endswith("/") else host_url + "/"
        self.http = httpx.AsyncClient(
            base_url=self.host_url,
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/json",
                "User-Agent": "youtrack-hot-issues/0.1.0",
            },
            transport=transport,
        )

    async def __aenter__(self) -> "YouTrackClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.http.aclose()

    def _convert_issue(self, data: dict[str, Any]) -> YouTrackIssue:
        """Convert a REST API issue payload to our model."""
        return YouTrackIssue(
            id=data["idReadable"],
            summary=data.get("summary") or "",
            comments_count=data.get("commentsCount") or 0,
            created=from_epoch_millis(data["created"]),
            tags=[tag["name"] for tag in data.get("tags") or []],
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request and translate failures into client exceptions."""
        try:
            response = await self.http.request(method, path, **kwargs)
        except (httpx.ConnectError, httpx.ConnectTimeout) as e:
            raise YouTrackConnectionError(
                f"Can't connect to YouTrack at {self.host_url}: {e}"
            ) from e

        if response.status_code in (401, 403):
            raise YouTrackConnectionError(
                f"YouTrack rejected the token ({response.status_code}) "
                f"for {self.host_url}"
            )
        if response.is_error:
            raise YouTrackError(response.status_code, self._error_message(response))

        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract the error description YouTrack sends back, if any."""
        try:
            payload = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(payload, dict):
            return str(
                payload.get("error_description")
                or payload.get("error")
                or response.reason_phrase
            )
        return response.reason_phrase

    async def search_issues(
        self, query: str, skip: int = 0, top: int = 100
    ) -> list[YouTrackIssue]:
        """Run a YouTrack search query and return one page of issues.

        Args:
            query: Query in YouTrack search syntax
            skip: Number of matching issues to skip
            top: Maximum number of issues to return

        Returns:
            List of YouTrackIssue objects
        """
        logger.debug("Searching with query %r (skip=%d, top=%d)", query, skip, top)
        response = await self._request(
            "GET",
            "api/issues",
            params={
                "query": query,
                "fields": ISSUE_FIELDS,
                "$skip": skip,
                "$top": top,
            },
        )
        return [self._convert_issue(item) for item in response.json()]

    async def fetch_by_tag(self, tag_query: str, limit: int) -> list[YouTrackIssue]:
        """Fetch issues matching a tag query, capped at ``limit`` results."""
        return await self.search_issues(tag_query, skip=0, top=limit)

    async def fetch_by_project(
        self,
        project: str,
        search_filter: str,
        offset: int,
        limit: int,
        updated_after: datetime,
    ) -> list[YouTrackIssue]:
        """Fetch one page of project issues updated after a given moment.

        Args:
            project: Project short name, e.g. DEXP
            search_filter: Additional query in YouTrack search syntax
            offset: Number of matching issues to skip
            limit: Page size
            updated_after: Only issues updated after this moment are returned

        Returns:
            List of YouTrackIssue objects
        """
        since = format_datetime_for_youtrack(updated_after)
        query = f"project: {project} updated: {since} .. * {search_filter}".strip()
        return await self.search_issues(query, skip=offset, top=limit)

    async def apply_command(
        self, issue_id: str, command: str, disable_notifications: bool = True
    ) -> None:
        """Apply a textual command (e.g. ``tag hot``) to an issue.

        Args:
            issue_id: Readable issue id
            command: Command in YouTrack command syntax
            disable_notifications: Apply silently, without notifying watchers

        Raises:
            YouTrackError: If YouTrack rejects the command
            YouTrackConnectionError: If YouTrack can't be reached
        """
        logger.debug(
            "Applying command %r to %s (silent=%s)",
            command,
            issue_id,
            disable_notifications,
        )
        await self._request(
            "POST",
            "api/commands",
            json={
                "query": command,
                "issues": [{"idReadable": issue_id}],
                "silent": disable_notifications,
            },
        )
