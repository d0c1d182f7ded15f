"""Run configuration for hot issue triage."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_PROJECT = "DEXP"
DEFAULT_COMMENT_THRESHOLD = 10
DEFAULT_HOT_ISSUES_AMOUNT = 5


class TriageConfig(BaseModel):
    """Already-parsed settings consumed by the triage pipeline."""

    host_url: str = Field(..., description="YouTrack base URL, always ending in '/'")
    token: str | None = Field(
        None, description="Permanent token (falls back to YOUTRACK_TOKEN)"
    )
    search_condition: str = Field(
        "", description="Free-text YouTrack query appended to the base filter"
    )
    tag: str | None = Field(
        None, description="Marker tag for hot issues; empty disables tagging"
    )
    comment_threshold: int = Field(
        DEFAULT_COMMENT_THRESHOLD,
        ge=0,
        description="Issues with more comments than this are always hot",
    )
    hot_issues_amount: int = Field(
        DEFAULT_HOT_ISSUES_AMOUNT,
        ge=0,
        description="Number of top hot issues listed in the short report",
    )
    project: str = Field(DEFAULT_PROJECT, description="Project short name to scan")
    output_dir: Path = Field(
        Path("."), description="Directory report.txt and report.html are written to"
    )

    @field_validator("host_url")
    @classmethod
    def normalize_host_url(cls, v: str) -> str:
        """Issue links are built as host_url + 'issue/<id>', so keep a trailing slash."""
        v = v.strip()
        if not v:
            raise ValueError("YouTrack host URL must not be empty")
        return v if v.endswith("/") else v + "/"

    @field_validator("tag")
    @classmethod
    def empty_tag_disables_tagging(cls, v: str | None) -> str | None:
        """Treat a blank tag the same as no tag."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def tagging_enabled(self) -> bool:
        """Whether the marker tag should be reconciled on this run."""
        return self.tag is not None
