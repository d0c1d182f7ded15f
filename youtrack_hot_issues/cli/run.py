"""CLI command running one hot issue triage pass."""

import asyncio
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..config import TriageConfig
from ..slack.client import SlackClient
from ..triage.pipeline import PipelineResult, run_pipeline, write_reports
from ..utils.teamcity import export_build_parameter
from ..youtrack_client.client import YouTrackClient, YouTrackConnectionError
from .options import (
    COMMENT_THRESHOLD_OPTION,
    HOST_URL_OPTION,
    HOT_ISSUES_AMOUNT_OPTION,
    OUTPUT_DIR_OPTION,
    PROJECT_OPTION,
    SEARCH_CONDITION_OPTION,
    SLACK_OPTION,
    TAG_OPTION,
    TEAMCITY_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()

SHORT_REPORT_PARAMETER = "env.short_report"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )


async def _run(config: TriageConfig, client: YouTrackClient) -> PipelineResult:
    async with client:
        return await run_pipeline(config, client)


def run(
    host_url: str = HOST_URL_OPTION,
    token: str | None = TOKEN_OPTION,
    project: str = PROJECT_OPTION,
    search_condition: str = SEARCH_CONDITION_OPTION,
    tag: str | None = TAG_OPTION,
    comment_threshold: int = COMMENT_THRESHOLD_OPTION,
    hot_issues_amount: int = HOT_ISSUES_AMOUNT_OPTION,
    output_dir: str | None = OUTPUT_DIR_OPTION,
    teamcity: bool = TEAMCITY_OPTION,
    slack: bool = SLACK_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Find hot issues, keep the hot tag in sync and write the reports.

    Scans unresolved, unassigned issues of the project updated during the
    last week. An issue is hot when it has more comments than the threshold,
    or more than half of it and was created during the last 15 days.

    Writes report.txt and report.html, prints the short report and publishes
    it as the env.short_report TeamCity build parameter.

    Examples:
        youtrack-hot-issues run --host-url https://youtrack.example.com/ \\
            --tag hot --comment-threshold 10 --search "Subsystem: Debugger"

        youtrack-hot-issues run -u https://youtrack.example.com/ \\
            --no-teamcity --output-dir out
    """
    _setup_logging(verbose)

    try:
        config = TriageConfig(
            host_url=host_url,
            token=token,
            search_condition=search_condition,
            tag=tag,
            comment_threshold=comment_threshold,
            hot_issues_amount=hot_issues_amount,
            project=project,
            output_dir=Path(output_dir) if output_dir else Path("."),
        )
        client = YouTrackClient(config.host_url, config.token)
    except (ValidationError, ValueError) as e:
        console.print(f"❌ Error: {e}", style="red", markup=False)
        raise typer.Exit(1)

    params_table = Table(title="Triage Parameters")
    params_table.add_column("Parameter", style="cyan")
    params_table.add_column("Value", style="green")
    params_table.add_row("YouTrack", config.host_url)
    params_table.add_row("Project", config.project)
    params_table.add_row("Search", config.search_condition or "-")
    params_table.add_row("Hot Tag", config.tag or "(tagging disabled)")
    params_table.add_row("Comment Threshold", str(config.comment_threshold))
    params_table.add_row("Top Issues", str(config.hot_issues_amount))
    console.print(params_table)

    try:
        result = asyncio.run(_run(config, client))
    except YouTrackConnectionError as e:
        console.print("Can't establish a connection to YouTrack", style="bold red")
        console.print(str(e), style="red", markup=False)
        return

    html_path, text_path = write_reports(result, config.output_dir)
    console.print(f"📁 Reports written to {html_path} and {text_path}")

    short_report = result.short_report.to_plain_text()
    typer.echo(short_report)

    if teamcity:
        export_build_parameter(SHORT_REPORT_PARAMETER, short_report)

    if slack:
        if SlackClient().post_short_report(result.short_header, result.top_lines):
            console.print("✅ [green]Short report posted to Slack[/green]")
        else:
            console.print("⚠️  [yellow]Short report was not posted to Slack[/yellow]")
