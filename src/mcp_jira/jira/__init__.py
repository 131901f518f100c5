"""Jira Cloud API client package."""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .issues import IssuesMixin
from .links import LinksMixin
from .search import SearchMixin
from .transitions import TransitionsMixin
from .users import UsersMixin
from .worklog import WorklogMixin


class JiraFetcher(
    IssuesMixin,
    CommentsMixin,
    WorklogMixin,
    TransitionsMixin,
    LinksMixin,
    SearchMixin,
    UsersMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Reading, creating and updating issues
    - CommentsMixin: Comment operations
    - WorklogMixin: Time tracking
    - TransitionsMixin: Workflow transitions
    - LinksMixin: Issue links
    - SearchMixin: JQL search
    - UsersMixin: The authenticated user
    """

    pass


__all__ = ["JiraClient", "JiraConfig", "JiraFetcher"]
