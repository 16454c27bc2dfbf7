"""Weekly Slack report of rottening GitHub issues."""

__version__ = "0.1.0"
