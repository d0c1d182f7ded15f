"""Standardized CLI option definitions for consistent shorthand mappings.

This module provides centralized option definitions so the option names,
shorthands and environment variable fallbacks stay in one place.
"""

import typer

from ..config import (
    DEFAULT_COMMENT_THRESHOLD,
    DEFAULT_HOT_ISSUES_AMOUNT,
    DEFAULT_PROJECT,
)

# Connection options
HOST_URL_OPTION = typer.Option(
    ...,
    "--host-url",
    "-u",
    envvar="YOUTRACK_URL",
    help="YouTrack base URL, e.g. https://youtrack.example.com/",
)

TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    help="YouTrack permanent token (defaults to YOUTRACK_TOKEN env var)",
)

# Search options
PROJECT_OPTION = typer.Option(
    DEFAULT_PROJECT, "--project", "-p", help="Project short name to scan"
)

SEARCH_CONDITION_OPTION = typer.Option(
    "",
    "--search",
    "-s",
    envvar="YOUTRACK_SEARCH",
    help="Extra YouTrack query appended to the unresolved/unassigned filter",
)

# Triage options
TAG_OPTION = typer.Option(
    None,
    "--tag",
    envvar="YOUTRACK_HOT_TAG",
    help="Tag kept on hot issues (tagging is disabled when empty)",
)

COMMENT_THRESHOLD_OPTION = typer.Option(
    DEFAULT_COMMENT_THRESHOLD,
    "--comment-threshold",
    "-c",
    min=0,
    help="Issues with more comments than this are hot",
)

HOT_ISSUES_AMOUNT_OPTION = typer.Option(
    DEFAULT_HOT_ISSUES_AMOUNT,
    "--hot-issues-amount",
    "-n",
    min=0,
    help="Number of top hot issues in the short report",
)

# Output options
OUTPUT_DIR_OPTION = typer.Option(
    None, "--output-dir", "-o", help="Directory for report files (defaults to .)"
)

TEAMCITY_OPTION = typer.Option(
    True,
    "--teamcity/--no-teamcity",
    help="Publish the short report as the env.short_report build parameter",
)

SLACK_OPTION = typer.Option(
    False,
    "--slack/--no-slack",
    help="Post the short report to Slack (needs SLACK_BOT_TOKEN)",
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Enable debug logging on stderr"
)
