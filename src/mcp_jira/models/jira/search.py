"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing a Jira Cloud search (JQL) result.

    The ``search/jql`` endpoint pages with ``nextPageToken`` and reports
    no total, so ``total`` is the number of issues on this page.
    """

    total: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)
    next_page_token: str | None = None
    is_last: bool = True

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: Passed through to ``JiraIssue.from_api_response``

        Returns:
            A JiraSearchResult instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        issues = [
            JiraIssue.from_api_response(issue_data, **kwargs)
            for issue_data in data.get("issues") or []
            if issue_data
        ]
        next_token = data.get("nextPageToken")

        return cls(
            total=len(issues),
            issues=issues,
            next_page_token=next_token,
            is_last=bool(data.get("isLast", next_token is None)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "total": self.total,
            "issues": [issue.to_simplified_dict() for issue in self.issues],
        }
        if self.next_page_token:
            result["next_page_token"] = self.next_page_token
        return result
