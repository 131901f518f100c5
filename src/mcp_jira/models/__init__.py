"""
Pydantic models for Jira API responses.
"""

from .base import ApiModel
from .jira import (
    JiraComment,
    JiraIssue,
    JiraIssueLinkType,
    JiraIssueType,
    JiraPriority,
    JiraSearchResult,
    JiraStatus,
    JiraTransition,
    JiraUser,
    JiraWorklog,
)

__all__ = [
    "ApiModel",
    "JiraComment",
    "JiraIssue",
    "JiraIssueLinkType",
    "JiraIssueType",
    "JiraPriority",
    "JiraSearchResult",
    "JiraStatus",
    "JiraTransition",
    "JiraUser",
    "JiraWorklog",
]
