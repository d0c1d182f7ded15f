"""Tests for Slack short report publishing."""

from unittest.mock import MagicMock, patch

import pytest
from slack_sdk.errors import SlackApiError

from youtrack_hot_issues.slack.client import SlackClient
from youtrack_hot_issues.slack.config import SlackConfig


@pytest.fixture
def slack_config(monkeypatch: pytest.MonkeyPatch) -> SlackConfig:
    """Slack configuration with a bot token and channel."""
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-test")
    monkeypatch.setenv("SLACK_CHANNEL", "#triage")
    return SlackConfig()


class TestSlackConfig:
    """Test Slack configuration."""

    def test_from_environment(self, slack_config: SlackConfig) -> None:
        """Test values are read from the environment."""
        assert slack_config.bot_token == "xoxb-test"
        assert slack_config.channel == "#triage"
        assert slack_config.is_configured()

    def test_missing_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test validation fails without a bot token."""
        monkeypatch.delenv("SLACK_BOT_TOKEN", raising=False)
        config = SlackConfig()
        assert not config.is_configured()
        with pytest.raises(ValueError, match="SLACK_BOT_TOKEN"):
            config.validate()


class TestSlackClient:
    """Test posting the short report."""

    @patch("youtrack_hot_issues.slack.client.WebClient")
    def test_post_short_report(
        self, mock_web_client: MagicMock, slack_config: SlackConfig
    ) -> None:
        """Test the report is posted as header and bullet list blocks."""
        mock_web_client.return_value.chat_postMessage.return_value = {"ok": True}

        client = SlackClient(slack_config)
        posted = client.post_short_report(
            "Top 1 of 3 hot issues", ["<https://yt/issue/DEXP-1|DEXP-1> Hang / 9 comments"]
        )

        assert posted is True
        mock_web_client.assert_called_once_with(token="xoxb-test")
        kwargs = mock_web_client.return_value.chat_postMessage.call_args.kwargs
        assert kwargs["channel"] == "#triage"
        assert kwargs["text"] == "Top 1 of 3 hot issues"
        assert kwargs["blocks"][0]["text"]["text"] == "🔥 *Top 1 of 3 hot issues*"
        assert kwargs["blocks"][1]["text"]["text"] == (
            "• <https://yt/issue/DEXP-1|DEXP-1> Hang / 9 comments"
        )

    @patch("youtrack_hot_issues.slack.client.WebClient")
    def test_no_lines_posts_header_only(
        self, mock_web_client: MagicMock, slack_config: SlackConfig
    ) -> None:
        """Test an empty top list posts just the header block."""
        mock_web_client.return_value.chat_postMessage.return_value = {"ok": True}

        SlackClient(slack_config).post_short_report("Top 0 of 0 hot issues", [])

        kwargs = mock_web_client.return_value.chat_postMessage.call_args.kwargs
        assert len(kwargs["blocks"]) == 1

    @patch("youtrack_hot_issues.slack.client.WebClient")
    def test_api_error_returns_false(
        self, mock_web_client: MagicMock, slack_config: SlackConfig
    ) -> None:
        """Test Slack API errors are logged and reported as not posted."""
        mock_web_client.return_value.chat_postMessage.side_effect = SlackApiError(
            "channel_not_found", {"ok": False, "error": "channel_not_found"}
        )

        assert SlackClient(slack_config).post_short_report("Top", []) is False

    def test_not_configured_skips(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test nothing is posted without a bot token."""
        monkeypatch.delenv("SLACK_BOT_TOKEN", raising=False)
        assert SlackClient().post_short_report("Top", []) is False
