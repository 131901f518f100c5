"""
Jira data models.

This package provides Pydantic models for Jira Cloud REST API data,
organized by entity type.
"""

from .adf import adf_to_text
from .comment import JiraComment
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .issue import JiraIssue
from .link import JiraIssueLinkType
from .search import JiraSearchResult
from .workflow import JiraTransition
from .worklog import JiraWorklog

__all__ = [
    # Common models
    "JiraUser",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    # Entity-specific models
    "JiraComment",
    "JiraWorklog",
    "JiraTransition",
    "JiraIssue",
    "JiraSearchResult",
    "JiraIssueLinkType",
    "adf_to_text",
]
