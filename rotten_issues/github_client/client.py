"""GitHub API client using PyGitHub."""

import logging
import os
from typing import Any

import requests
from github import Auth, Github
from github.GithubException import GithubException
from pydantic import ValidationError

from ..errors import ConfigurationError, FetchError
from .models import Issue, Repository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100
DEFAULT_BASE_URL = "https://api.github.com"


class GitHubClient:
    """GitHub API client for organization-wide issue listings."""

    def __init__(
        self,
        token: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        base_url: str = DEFAULT_BASE_URL,
    ):
        """Initialize GitHub client with authentication.

        Retries are switched off: any failed request is final.

        Args:
            token: GitHub personal access token. If None, reads from
                GH_TOKEN env var.
            page_size: Number of issues requested in the single page fetched.
            base_url: API root, for GitHub Enterprise or a local test server.
        """
        self.token = token or os.getenv("GH_TOKEN")
        if not self.token:
            raise ConfigurationError(
                "GitHub token is required. Set GH_TOKEN environment variable."
            )

        self.page_size = page_size
        self.github = Github(
            auth=Auth.Token(self.token),
            base_url=base_url,
            per_page=page_size,
            retry=None,
        )

    def _convert_repository(self, raw: dict[str, Any]) -> Repository:
        """Convert a raw repository payload to our model."""
        return Repository(id=raw["id"], name=raw["name"], url=raw["html_url"])

    def _convert_issue(self, raw: dict[str, Any]) -> Issue:
        """Convert a raw issue payload to our model."""
        return Issue(
            url=raw["html_url"],
            title=raw["title"],
            repository=self._convert_repository(raw["repository"]),
            body=raw.get("body"),
            state=raw["state"],
            created_at=raw["created_at"],
            updated_at=raw["updated_at"],
            # Only pull requests carry this link object
            is_pull_request=raw.get("pull_request") is not None,
        )

    def fetch_open_issues(self, org: str) -> list[Issue]:
        """Fetch the first page of open issues across an organization.

        Args:
            org: Organization name

        Returns:
            List of Issue objects, pull requests included

        Raises:
            FetchError: On transport errors, non-2xx responses or a payload
                that does not look like a list of issues
        """
        url = f"/orgs/{org}/issues"
        parameters = {"filter": "all", "state": "open", "per_page": self.page_size}
        logger.debug("GET %s %s", url, parameters)

        try:
            _, data = self.github.requester.requestJsonAndCheck(
                "GET", url, parameters=parameters
            )
        except GithubException as e:
            raise FetchError(
                f"Received status code {e.status} and body '{e.data}'\n"
                "Make sure that the GitHub token you are using has the "
                "public_repo scope and that the organization exists"
            ) from e
        except requests.RequestException as e:
            raise FetchError(f"Could not reach the GitHub API: {e}") from e
        except ValueError as e:
            raise FetchError(f"GitHub returned a body that is not JSON: {e}") from e

        if not isinstance(data, list):
            raise FetchError(
                f"Unexpected response for {org} issues: expected a list, "
                f"got {type(data).__name__}"
            )

        try:
            issues = [self._convert_issue(raw) for raw in data]
        except (KeyError, TypeError, ValidationError) as e:
            raise FetchError(f"Malformed issue in GitHub response: {e}") from e

        logger.info("Fetched %d open issues for %s", len(issues), org)
        return issues
