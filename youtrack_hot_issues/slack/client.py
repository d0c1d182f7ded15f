"""Slack client for posting the short hot issue report."""

import logging
from typing import Any, Dict, List, Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from .config import SlackConfig

logger = logging.getLogger(__name__)


class SlackClient:
    """Client for sending the short report to a Slack channel."""

    def __init__(self, config: Optional[SlackConfig] = None) -> None:
        """Initialize Slack client with configuration."""
        self.config = config or SlackConfig()
        self._bot_client: Optional[WebClient] = None

    @property
    def bot_client(self) -> WebClient:
        """Get or create Slack WebClient instance for the bot token."""
        if self._bot_client is None:
            self.config.validate()
            self._bot_client = WebClient(token=self.config.bot_token)
        return self._bot_client

    def post_short_report(self, header: str, lines: List[str]) -> bool:
        """
        Post the short report to the configured channel.

        Lines are expected to be chat-safe already (``<url|id> title / N comments``).

        Args:
            header: Report header, e.g. "Top 5 of 12 hot issues"
            lines: Chat-formatted issue lines

        Returns:
            True if the message was posted, False otherwise
        """
        if not self.config.is_configured():
            logger.warning("Slack is not configured, skipping notification")
            return False

        try:
            response = self.bot_client.chat_postMessage(
                channel=self.config.channel,
                blocks=self._format_short_report(header, lines),
                text=header,
            )
            return bool(response["ok"])

        except SlackApiError as e:
            logger.error(f"Error posting short report to Slack: {e}")
        except Exception as e:
            logger.error(f"Unexpected error posting short report: {e}")

        return False

    def _format_short_report(
        self, header: str, lines: List[str]
    ) -> List[Dict[str, Any]]:
        """
        Format the short report into Slack Block Kit format.

        Args:
            header: Report header
            lines: Chat-formatted issue lines

        Returns:
            List of Slack Block Kit blocks
        """
        blocks: List[Dict[str, Any]] = [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"🔥 *{header}*"},
            }
        ]

        if lines:
            blocks.append(
                {
                    "type": "section",
                    "text": {
                        "type": "mrkdwn",
                        "text": "\n".join(f"• {line}" for line in lines),
                    },
                }
            )

        return blocks
