"""Pydantic models for YouTrack data structures.

These models map to the subset of YouTrack's REST API issue entity the
triage run needs.
API Reference: https://www.jetbrains.com/help/youtrack/devportal/api-entity-Issue.html
"""

from datetime import datetime

from pydantic import BaseModel, Field


class YouTrackIssue(BaseModel):
    """YouTrack issue snapshot taken at the start of a run.

    Maps to the REST API Issue entity requested with
    ``fields=idReadable,summary,commentsCount,created,tags(name)``.
    """

    id: str = Field(..., description="Readable issue id, e.g. 'DEXP-123' (string)")
    summary: str = Field("", description="Issue title/summary (string)")
    comments_count: int = Field(
        0, ge=0, description="Number of comments on the issue (integer)"
    )
    created: datetime = Field(..., description="Timestamp of issue creation (UTC)")
    tags: list[str] = Field(
        default_factory=list, description="Names of tags attached to the issue"
    )
