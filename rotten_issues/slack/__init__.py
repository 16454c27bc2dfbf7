"""Slack integration module for rottening issue reports."""

from .client import SlackClient
from .config import SlackConfig

__all__ = ["SlackClient", "SlackConfig"]
