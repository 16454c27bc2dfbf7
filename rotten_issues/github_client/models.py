"""Pydantic models for the GitHub data the report works on.

These models map to the subset of GitHub's REST API v3 issue payload that
the organization issues endpoint returns.
API Reference: https://docs.github.com/en/rest/issues/issues#list-organization-issues-assigned-to-the-authenticated-user
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Repository(BaseModel):
    """Repository an issue belongs to.

    Maps to the ``repository`` object embedded in each organization issue.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique repository identifier (integer)")
    name: str = Field(..., description="Repository name without the owner (string)")
    url: str = Field(..., description="Browser URL of the repository (html_url)")


class Issue(BaseModel):
    """Open GitHub issue as fetched from the organization endpoint.

    Pull requests are returned by the same endpoint; they are kept here and
    flagged through ``is_pull_request`` so filtering can drop them.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Browser URL of the issue (html_url)")
    title: str = Field(..., description="Short description/title of the issue")
    repository: Repository = Field(..., description="Owning repository")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown"
    )
    state: str = Field(..., description="Current state: 'open', 'closed'")
    created_at: datetime = Field(
        ..., description="Timestamp of issue creation (ISO 8601)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last issue update (ISO 8601)"
    )
    is_pull_request: bool = Field(
        False, description="Whether the payload carried a pull_request link"
    )
