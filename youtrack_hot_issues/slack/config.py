"""Configuration for Slack integration."""

import os
from typing import Optional


class SlackConfig:
    """Configuration class for Slack API integration."""

    def __init__(self) -> None:
        """Initialize Slack configuration from environment variables."""
        self.bot_token: Optional[str] = os.getenv("SLACK_BOT_TOKEN")
        self.channel: str = os.getenv("SLACK_CHANNEL", "#hot-issues")

    def is_configured(self) -> bool:
        """Check if Slack is properly configured."""
        return bool(self.bot_token)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.bot_token:
            raise ValueError(
                "Environment variable required for Slack notifications: "
                "SLACK_BOT_TOKEN"
            )
