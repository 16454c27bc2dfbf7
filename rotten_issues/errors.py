"""Exceptions raised by the rotten-issues pipeline.

Components raise these; only the CLI decides how the process exits.
"""


class RottenIssuesError(Exception):
    """Base class for every failure the report pipeline can hit."""


class ConfigurationError(RottenIssuesError):
    """A required token or setting is missing."""


class FetchError(RottenIssuesError):
    """Fetching issues from GitHub failed."""


class IgnoredReposError(RottenIssuesError):
    """The ignored repositories file could not be read."""


class CounterFileError(RottenIssuesError):
    """The weekly counter file is missing or corrupt."""


class NotifyError(RottenIssuesError):
    """Posting the report to Slack failed."""
