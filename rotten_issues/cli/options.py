"""Standardized CLI option definitions.

The report options accept both single-dash Go-style spellings
(``-channel=general``) and the usual double-dash spellings.
"""

import typer

from ..storage.counter import DEFAULT_COUNTER_FILE

CHANNEL_OPTION = typer.Option(
    ..., "--channel", "-channel", help="The Slack channel to post to"
)

GITHUB_ORG_OPTION = typer.Option(
    ...,
    "--github-org",
    "-github-org",
    help="The GitHub organisation to check for rottening issues in",
)

IGNORED_REPOS_PATH_OPTION = typer.Option(
    None,
    "--ignored-repos-path",
    "-ignored-repos-path",
    help="Path to a file listing repositories to ignore, one per line",
)

ROTTENING_THRESHOLD_OPTION = typer.Option(
    100,
    "--rottening-treshold",
    "-rottening-treshold",
    min=0,
    help="The threshold in days for when an issue is considered rotten",
)

COUNTER_FILE_OPTION = typer.Option(
    DEFAULT_COUNTER_FILE,
    "--counter-file",
    help="File holding last week's number of rottening issues",
)

DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    "-d",
    help="Print the report without posting it or updating the counter file",
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
