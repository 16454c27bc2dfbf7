"""Slack message formatting for the weekly rottening issues report."""

import math
from collections.abc import Sequence
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from ..github_client.models import Issue

# Slack truncates longer attachment texts
MAX_ATTACHMENT_LENGTH = 3500
SECONDS_PER_DAY = 86400


class WeeklyReport(BaseModel):
    """Formatted report ready to be posted."""

    text: str = Field(..., description="Main message text with the weekly summary")
    attachments: list[str] = Field(
        default_factory=list,
        description="Issue listing split into blocks of bounded length",
    )


def days_since(moment: datetime, now: datetime | None = None) -> int:
    """Count whole days elapsed since ``moment``."""
    now = now or datetime.now(timezone.utc)
    return math.floor((now - moment).total_seconds() / SECONDS_PER_DAY)


def format_summary(
    issues_this_week: int, issues_last_week: int, threshold_days: int
) -> str:
    """Build the header comparing this week's count with last week's."""
    message = (
        f"Currently we have *{issues_this_week}* issues that have not updated "
        f"for over *{threshold_days}* days\n"
    )

    if issues_this_week < issues_last_week:
        message += (
            f"That is *{issues_last_week - issues_this_week}* fewer than last week "
            ":slightly_smiling_face:"
        )
    elif issues_this_week > issues_last_week:
        message += (
            f"That is *{issues_this_week - issues_last_week}* more than last week "
            ":white_frowning_face:"
        )
    else:
        message += "That is the same number as last week :neutral_face:"

    return message + "\n\n*Rottening issues:* \n\n"


def _render_bullet(issue: Issue, title: str, days_ago: int) -> str:
    return (
        f"• <{issue.url}|{title}> in the "
        f"<{issue.repository.url}|{issue.repository.name}> repo\n"
        f"Last updated *{days_ago}* days ago\n\n"
    )


def format_issue_bullet(
    issue: Issue,
    now: datetime | None = None,
    max_length: int = MAX_ATTACHMENT_LENGTH,
) -> str:
    """Render one issue as a Slack mrkdwn bullet.

    An overlong title is shortened so the bullet fits in one attachment;
    the links themselves are never cut.
    """
    # Backticks would open a code span in Slack mrkdwn
    title = issue.title.replace("`", "")
    days_ago = days_since(issue.updated_at, now)
    bullet = _render_bullet(issue, title, days_ago)

    overflow = len(bullet) - max_length
    if overflow > 0:
        shortened = title[: max(len(title) - overflow - 1, 0)] + "…"
        bullet = _render_bullet(issue, shortened, days_ago)
    return bullet


def split_into_attachments(
    bullets: Sequence[str], max_length: int = MAX_ATTACHMENT_LENGTH
) -> list[str]:
    """Pack bullets into blocks no longer than ``max_length``.

    A bullet that would push the running block over the limit closes it and
    starts the next one.

    Raises:
        ValueError: If a single bullet is longer than the limit

    Example:
        >>> split_into_attachments(["aaa", "bbb", "c"], max_length=4)
        ['aaa', 'bbbc']
    """
    blocks: list[str] = []
    current = ""

    for bullet in bullets:
        if len(bullet) > max_length:
            raise ValueError(
                f"Bullet of {len(bullet)} characters exceeds the "
                f"{max_length} character attachment limit"
            )
        if current and len(current) + len(bullet) > max_length:
            blocks.append(current)
            current = ""
        current += bullet

    if current:
        blocks.append(current)
    return blocks


def format_weekly_report(
    issues: Sequence[Issue],
    issues_last_week: int,
    issues_this_week: int,
    threshold_days: int,
    now: datetime | None = None,
) -> WeeklyReport:
    """Format the weekly report for already filtered and sorted issues.

    Args:
        issues: Rottening issues, oldest first
        issues_last_week: Count stored by the previous run
        issues_this_week: Count for this run
        threshold_days: Threshold used to select the issues
        now: Reference time for the "days ago" figures

    Returns:
        WeeklyReport with the summary text and the issue listing blocks
    """
    if issues_this_week == 0:
        return WeeklyReport(
            text=(
                "No rottening issues! Great work :fiestaparrot:\n"
                f" Last week we had *{issues_last_week}* rottening issues."
            )
        )

    now = now or datetime.now(timezone.utc)
    bullets = [format_issue_bullet(issue, now) for issue in issues]

    return WeeklyReport(
        text=format_summary(issues_this_week, issues_last_week, threshold_days),
        attachments=split_into_attachments(bullets),
    )
