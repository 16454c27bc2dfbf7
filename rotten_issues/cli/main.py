"""Main CLI entry point."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..errors import RottenIssuesError
from ..github_client.client import GitHubClient
from ..pipeline import run_weekly_report
from ..rot.filters import load_ignored_repos
from ..rot.formatter import WeeklyReport
from ..slack.client import SlackClient
from ..slack.config import SlackConfig
from ..storage.counter import CounterStore
from .options import (
    CHANNEL_OPTION,
    COUNTER_FILE_OPTION,
    DRY_RUN_OPTION,
    GITHUB_ORG_OPTION,
    IGNORED_REPOS_PATH_OPTION,
    ROTTENING_THRESHOLD_OPTION,
    VERBOSE_OPTION,
)

app = typer.Typer(
    name="rotten-issues",
    help="Post a weekly Slack report of GitHub issues nobody has touched in a while",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=verbose)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Print the version and stop."""
    if value:
        from rotten_issues import __version__

        console.print(f"Rotten Issues v{__version__}")
        raise typer.Exit()


def print_report(report: WeeklyReport) -> None:
    """Show a report on the console instead of posting it."""
    console.rule("Message")
    console.print(report.text, markup=False, highlight=False, soft_wrap=True)
    for index, attachment in enumerate(report.attachments, start=1):
        console.rule(f"Attachment {index}/{len(report.attachments)}")
        console.print(attachment, markup=False, highlight=False, soft_wrap=True)


@app.command()
def report(
    channel: str = CHANNEL_OPTION,
    github_org: str = GITHUB_ORG_OPTION,
    ignored_repos_path: Path | None = IGNORED_REPOS_PATH_OPTION,
    rottening_treshold: int = ROTTENING_THRESHOLD_OPTION,
    counter_file: Path = COUNTER_FILE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    verbose: bool = VERBOSE_OPTION,
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """Report rottening issues of a GitHub organisation to a Slack channel.

    Requires GH_TOKEN and SLACK_TOKEN in the environment. Last week's count
    is read from the counter file and replaced once the report is posted.

    Examples:
        rotten-issues -channel=dev -github-org=my-org
        rotten-issues --channel dev --github-org my-org \\
            --ignored-repos-path ignored.txt --rottening-treshold 60
    """
    configure_logging(verbose)

    try:
        github = GitHubClient()
        slack = None
        if not dry_run:
            slack_config = SlackConfig()
            slack_config.validate()
            slack = SlackClient(slack_config)

        ignored_repos = load_ignored_repos(ignored_repos_path)
        if ignored_repos:
            console.print(
                f"📋 Ignoring repositories: {', '.join(sorted(ignored_repos))}"
            )

        console.print(
            f"🔎 Looking for issues in {github_org} not updated for "
            f"{rottening_treshold} days..."
        )
        weekly_report = run_weekly_report(
            github=github,
            slack=slack,
            counter=CounterStore(counter_file),
            org=github_org,
            channel=channel,
            threshold_days=rottening_treshold,
            ignored_repos=ignored_repos,
            dry_run=dry_run,
        )
    except (RottenIssuesError, ValueError) as e:
        console.print(f"❌ Error: {e}", markup=False)
        raise typer.Exit(1)

    if dry_run:
        print_report(weekly_report)
        console.print(f"✨ Dry run complete, nothing posted to {channel}")
    else:
        console.print(f"✨ Report posted to {channel}")


if __name__ == "__main__":
    app()
