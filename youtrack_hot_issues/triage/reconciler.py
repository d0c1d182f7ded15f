"""Keep the marker tag attached to exactly the hot issues."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import typer
from rich.console import Console

from ..youtrack_client.client import YouTrackError
from ..youtrack_client.models import YouTrackIssue
from ..youtrack_client.search import quote_tag

if TYPE_CHECKING:
    from ..youtrack_client.client import YouTrackClient

logger = logging.getLogger(__name__)
console = Console()


def tag_command(tag: str) -> str:
    return f"tag {quote_tag(tag)}"


def remove_tag_command(tag: str) -> str:
    return f"remove tag {quote_tag(tag)}"


@dataclass
class ReconciliationResult:
    """Tag changes applied during one run."""

    removed: list[str] = field(default_factory=list)
    removed_with_notifications: list[str] = field(default_factory=list)
    tagged: list[str] = field(default_factory=list)


class TagReconciler:
    """Applies marker tag changes one command at a time.

    YouTrack rejects bursts of simultaneous commands, so every command is
    awaited before the next one is sent.
    """

    def __init__(self, client: "YouTrackClient", tag: str):
        self.client = client
        self.tag = tag
        self.result = ReconciliationResult()

    async def remove_stale_tags(
        self,
        tagged_issues: list[YouTrackIssue],
        current_issues: Iterable[YouTrackIssue],
    ) -> list[str]:
        """Remove the tag from tagged issues that are no longer in the project set.

        The command is first applied silently. If YouTrack rejects it, it is
        retried once with notifications enabled; a second rejection propagates.

        Returns:
            Ids of issues the tag was removed from
        """
        current_ids = {issue.id for issue in current_issues}
        stale = [issue for issue in tagged_issues if issue.id not in current_ids]

        typer.echo(f"Removing tags {self.tag} from {len(tagged_issues)} issues")
        removed: list[str] = []
        for issue in stale:
            typer.echo(".", nl=False)
            try:
                await self.client.apply_command(
                    issue.id, remove_tag_command(self.tag), disable_notifications=True
                )
            except YouTrackError as e:
                logger.warning(
                    "Failed to remove tag %s silently from %s: %s",
                    self.tag,
                    issue.id,
                    e,
                )
                console.print(
                    f"⚠️  Failed to remove tag silently {self.tag} from {issue.id}",
                    style="yellow",
                    markup=False,
                )
                await self.client.apply_command(
                    issue.id, remove_tag_command(self.tag), disable_notifications=False
                )
                self.result.removed_with_notifications.append(issue.id)
            removed.append(issue.id)
        typer.echo("Finished.")

        self.result.removed.extend(removed)
        return removed

    async def tag_hot_issues(self, hot_issues: list[YouTrackIssue]) -> list[str]:
        """Attach the tag to every hot issue, silently and sequentially.

        Re-tagging an issue that already carries the tag is harmless, so the
        command is sent for the full hot set. Failures propagate.

        Returns:
            Ids of issues the tag command was applied to
        """
        typer.echo(f"Setting tags {self.tag}")
        tagged: list[str] = []
        for issue in hot_issues:
            typer.echo(".", nl=False)
            await self.client.apply_command(
                issue.id, tag_command(self.tag), disable_notifications=True
            )
            tagged.append(issue.id)
        typer.echo("Finished.")

        self.result.tagged.extend(tagged)
        return tagged
