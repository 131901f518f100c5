"""Module for Jira comment operations."""

import logging
from typing import Any

from ..models import JiraComment
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def get_issue_comments(
        self, issue_key: str, limit: int = 50
    ) -> list[JiraComment]:
        """
        Get comments for a specific issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            limit: Maximum number of comments to return

        Returns:
            Comments with their bodies flattened to plain text
        """
        response = self._get_api3(
            f"issue/{issue_key}/comment",
            params={"maxResults": limit, "orderBy": "created"},
        )
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from comment API: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        return [
            JiraComment.from_api_response(comment)
            for comment in response.get("comments", [])[:limit]
        ]

    def add_comment(
        self,
        issue_key: str,
        comment: str,
        visibility: dict[str, str] | None = None,
    ) -> JiraComment:
        """Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text; Markdown is converted to ADF
            visibility: (optional) Restrict comment visibility
                (e.g. {"type":"group","value":"jira-users"})

        Returns:
            The created comment
        """
        if not comment:
            raise ValueError("Comment text is required")

        data: dict[str, Any] = {"body": self._to_adf(comment)}
        if visibility:
            data["visibility"] = visibility

        result = self._post_api3(f"issue/{issue_key}/comment", data=data)
        if not isinstance(result, dict):
            msg = f"Unexpected return value type from comment API: {type(result)}"
            logger.error(msg)
            raise TypeError(msg)

        logger.info(f"Added comment {result.get('id')} to issue {issue_key}")
        return JiraComment.from_api_response(result)
