"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from rotten_issues.github_client.models import Issue, Repository

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for age computations."""
    return NOW


@pytest.fixture
def make_issue() -> Callable[..., Issue]:
    """Factory building issues last updated a given number of days before NOW."""

    def _make_issue(
        days_old: float = 2,
        repo: str = "api",
        title: str = "Something is broken",
        is_pull_request: bool = False,
        number: int = 1,
    ) -> Issue:
        updated_at = NOW - timedelta(days=days_old)
        return Issue(
            url=f"https://github.com/acme/{repo}/issues/{number}",
            title=title,
            repository=Repository(
                id=len(repo), name=repo, url=f"https://github.com/acme/{repo}"
            ),
            body="Details",
            state="open",
            created_at=updated_at - timedelta(days=10),
            updated_at=updated_at,
            is_pull_request=is_pull_request,
        )

    return _make_issue


@pytest.fixture
def raw_issue() -> dict[str, Any]:
    """Issue payload as returned by GET /orgs/{org}/issues."""
    return {
        "html_url": "https://github.com/acme/api/issues/7",
        "title": "Crash on `startup`",
        "body": None,
        "state": "open",
        "created_at": "2024-01-01T10:00:00Z",
        "updated_at": "2024-02-01T10:00:00Z",
        "repository": {
            "id": 42,
            "name": "api",
            "html_url": "https://github.com/acme/api",
        },
    }
