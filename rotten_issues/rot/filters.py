"""Selection and ordering of rottening issues."""

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from pathlib import Path

from ..errors import IgnoredReposError
from ..github_client.models import Issue


def load_ignored_repos(path: Path | str | None) -> frozenset[str]:
    """Load repository names to leave out of the report.

    Args:
        path: File with one repository name per line, or None

    Returns:
        Set of repository names; empty when no path is given

    Raises:
        IgnoredReposError: If the file cannot be read

    Example:
        >>> load_ignored_repos(None)
        frozenset()
    """
    if path is None:
        return frozenset()

    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise IgnoredReposError(f"Could not read ignored repos file {path}: {e}") from e

    return frozenset(filter(None, (line.strip() for line in content.split("\n"))))


def is_rottening(
    issue: Issue,
    threshold_days: int,
    ignored_repos: frozenset[str],
    now: datetime,
) -> bool:
    """Check whether an issue counts as rottening at ``now``."""
    if issue.is_pull_request:
        return False
    if issue.repository.name in ignored_repos:
        return False
    return now - issue.updated_at >= timedelta(days=threshold_days)


def filter_rottening_issues(
    issues: Iterable[Issue],
    threshold_days: int,
    ignored_repos: frozenset[str] = frozenset(),
    now: datetime | None = None,
) -> list[Issue]:
    """Keep the issues that are stale for at least ``threshold_days``.

    Pull requests and issues in ignored repositories are dropped. The order
    of the result follows the input.

    Args:
        issues: Issues to filter
        threshold_days: Minimum number of days since the last update
        ignored_repos: Repository names to drop
        now: Reference time, defaults to the current UTC time

    Returns:
        Surviving issues

    Raises:
        ValueError: If threshold_days is negative
    """
    if threshold_days < 0:
        raise ValueError(f"Rottening threshold must be >= 0, got {threshold_days}")

    now = now or datetime.now(timezone.utc)
    return [
        issue
        for issue in issues
        if is_rottening(issue, threshold_days, ignored_repos, now)
    ]


def sort_by_last_update(issues: Iterable[Issue]) -> list[Issue]:
    """Order issues by last update, oldest first."""
    return sorted(issues, key=lambda issue: issue.updated_at)


def find_rottening_issues(
    issues: Iterable[Issue],
    threshold_days: int,
    ignored_repos: frozenset[str] = frozenset(),
    now: datetime | None = None,
) -> list[Issue]:
    """Filter rottening issues and sort them oldest first."""
    return sort_by_last_update(
        filter_rottening_issues(issues, threshold_days, ignored_repos, now)
    )
