"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import Issue, Repository

__all__ = [
    "GitHubClient",
    "Issue",
    "Repository",
]
