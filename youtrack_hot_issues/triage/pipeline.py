"""Hot issue triage run: fetch, reconcile tags, classify and report."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ..config import TriageConfig
from ..report.aggregate import aggregate_hot_issues, aggregate_top_issues
from ..report.builder import ReportBuilder
from ..utils.date_parser import utc_now
from ..youtrack_client.client import YouTrackClient
from ..youtrack_client.models import YouTrackIssue
from ..youtrack_client.search import IssueFetcher
from .classifier import classify_hot_issues
from .reconciler import ReconciliationResult, TagReconciler

logger = logging.getLogger(__name__)

HTML_REPORT = "report.html"
TEXT_REPORT = "report.txt"


@dataclass
class PipelineResult:
    """Everything a run produced."""

    report: ReportBuilder
    short_report: ReportBuilder
    project_issues: list[YouTrackIssue]
    hot_issues: list[YouTrackIssue]
    elapsed: float
    short_header: str = ""
    top_lines: list[str] = field(default_factory=list)
    reconciliation: ReconciliationResult = field(default_factory=ReconciliationResult)


async def run_pipeline(
    config: TriageConfig,
    client: YouTrackClient,
    now: datetime | None = None,
    clock: Callable[[], float] = time.perf_counter,
) -> PipelineResult:
    """Run one triage pass against YouTrack.

    Phases run strictly in order: fetch, remove stale tags, classify, tag hot
    issues, aggregate. Report files are not touched here; see write_reports.

    Args:
        config: Run configuration
        client: Connected YouTrack client
        now: Reference time for recency rules (defaults to current UTC time)
        clock: Monotonic clock used for the elapsed time statistic

    Returns:
        PipelineResult with both reports and the run statistics
    """
    now = now or utc_now()
    started = clock()

    fetcher = IssueFetcher(client, config.project)
    reconciler = None
    tagged_issues: list[YouTrackIssue] = []
    if config.tagging_enabled:
        assert config.tag is not None  # guaranteed by tagging_enabled
        reconciler = TagReconciler(client, config.tag)
        tagged_issues = await fetcher.fetch_tagged(config.tag)

    project_issues = await fetcher.fetch_project_issues(
        config.search_condition, now=now
    )

    if reconciler:
        await reconciler.remove_stale_tags(tagged_issues, project_issues)

    hot_issues = classify_hot_issues(project_issues, config.comment_threshold, now)
    logger.info(
        "%d of %d issues are hot (threshold %d)",
        len(hot_issues),
        len(project_issues),
        config.comment_threshold,
    )

    if reconciler:
        await reconciler.tag_hot_issues(hot_issues)

    top_issues = hot_issues[: config.hot_issues_amount]
    hot_aggregated = aggregate_hot_issues(hot_issues, config.host_url)
    top_aggregated = aggregate_top_issues(top_issues, config.host_url)
    elapsed = clock() - started

    report = ReportBuilder()
    report.append_header(f"{config.project} HOT ({len(hot_issues)})")
    report.extend(hot_aggregated)
    report.append_header("Statistics")
    report.append_key_value("Time", f"{elapsed:.2f} sec")
    report.append_key_value("Issues scanned", str(len(project_issues)))
    report.append_key_value("Hot issues", str(len(hot_issues)))

    short_header = f"Top {len(top_issues)} of {len(hot_issues)} hot issues"
    short_report = ReportBuilder()
    short_report.append_header(short_header)
    for line in top_aggregated:
        short_report.append_line(line, line)

    return PipelineResult(
        report=report,
        short_report=short_report,
        project_issues=project_issues,
        hot_issues=hot_issues,
        elapsed=elapsed,
        short_header=short_header,
        top_lines=top_aggregated,
        reconciliation=reconciler.result if reconciler else ReconciliationResult(),
    )


def write_reports(result: PipelineResult, output_dir: Path) -> tuple[Path, Path]:
    """Write report.html and report.txt.

    Returns:
        Paths of the HTML and plain-text reports
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    html_path = output_dir / HTML_REPORT
    text_path = output_dir / TEXT_REPORT
    html_path.write_text(result.report.to_html(), encoding="utf-8")
    text_path.write_text(result.report.to_plain_text(), encoding="utf-8")
    return html_path, text_path
