"""Hot issue triage for YouTrack projects."""

__version__ = "0.1.0"
