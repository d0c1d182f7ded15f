"""Slack integration module for hot issue summaries."""

from .client import SlackClient
from .config import SlackConfig

__all__ = ["SlackClient", "SlackConfig"]
