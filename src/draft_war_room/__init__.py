"""Draft War Room - draft pick ownership and trade tracking for Sleeper leagues."""

__version__ = "0.1.0"
