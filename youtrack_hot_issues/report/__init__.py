"""Report building and title sanitization."""

from .aggregate import ReportEntry, aggregate_hot_issues, aggregate_top_issues
from .builder import ReportBuilder
from .sanitize import (
    escape_markup_title,
    pluralize_comments,
    sanitize_chat_title,
    truncate,
)

__all__ = [
    "ReportBuilder",
    "ReportEntry",
    "aggregate_hot_issues",
    "aggregate_top_issues",
    "escape_markup_title",
    "pluralize_comments",
    "sanitize_chat_title",
    "truncate",
]
