"""YouTrack client package for API interaction."""

from .client import YouTrackClient, YouTrackConnectionError, YouTrackError
from .models import YouTrackIssue
from .search import IssueFetcher, build_project_filter

__all__ = [
    "YouTrackClient",
    "YouTrackConnectionError",
    "YouTrackError",
    "YouTrackIssue",
    "IssueFetcher",
    "build_project_filter",
]
