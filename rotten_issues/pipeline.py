"""Weekly report pipeline: fetch, select, format, post, remember."""

import logging
from datetime import datetime, timezone

from .github_client.client import GitHubClient
from .rot.filters import find_rottening_issues
from .rot.formatter import WeeklyReport, format_weekly_report
from .slack.client import SlackClient
from .storage.counter import CounterStore

logger = logging.getLogger(__name__)


def run_weekly_report(
    github: GitHubClient,
    slack: SlackClient | None,
    counter: CounterStore,
    org: str,
    channel: str,
    threshold_days: int,
    ignored_repos: frozenset[str] = frozenset(),
    dry_run: bool = False,
    now: datetime | None = None,
) -> WeeklyReport:
    """Run one weekly report.

    The stored count is only advanced once the message has been posted, so a
    failed post leaves last week's figure in place for the next run. With
    ``dry_run`` nothing is posted and the counter is left untouched.

    Args:
        github: Client used to fetch the organization's open issues
        slack: Client used to post the report, unused on dry runs
        counter: Store holding last week's count
        org: GitHub organization name
        channel: Slack channel to post to
        threshold_days: Days without update before an issue is rottening
        ignored_repos: Repository names to leave out
        dry_run: Build the report without posting or storing anything
        now: Reference time, defaults to the current UTC time

    Returns:
        The report that was (or on a dry run would have been) posted
    """
    now = now or datetime.now(timezone.utc)

    issues_last_week = counter.read()
    issues = github.fetch_open_issues(org)
    rottening = find_rottening_issues(issues, threshold_days, ignored_repos, now)
    logger.info(
        "%d of %d open issues in %s are rottening",
        len(rottening),
        len(issues),
        org,
    )

    report = format_weekly_report(
        rottening,
        issues_last_week=issues_last_week,
        issues_this_week=len(rottening),
        threshold_days=threshold_days,
        now=now,
    )

    if dry_run:
        logger.info("Dry run, not posting to %s", channel)
        return report

    if slack is None:
        raise ValueError("A Slack client is required unless running dry")

    slack.post_report(channel, report)
    counter.write(len(rottening))
    return report
