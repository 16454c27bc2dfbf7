"""Rottening issue selection and report formatting."""

from .filters import (
    filter_rottening_issues,
    find_rottening_issues,
    is_rottening,
    load_ignored_repos,
    sort_by_last_update,
)
from .formatter import WeeklyReport, format_weekly_report

__all__ = [
    "WeeklyReport",
    "filter_rottening_issues",
    "find_rottening_issues",
    "format_weekly_report",
    "is_rottening",
    "load_ignored_repos",
    "sort_by_last_update",
]
