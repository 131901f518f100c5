"""
Jira worklog models.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .adf import adf_to_text
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraWorklog(ApiModel):
    """
    Model representing a Jira worklog entry.
    """

    id: str = JIRA_DEFAULT_ID
    author: JiraUser | None = None
    comment: str | None = None
    started: str = EMPTY_STRING
    time_spent: str = EMPTY_STRING
    time_spent_seconds: int = 0
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraWorklog":
        """
        Create a JiraWorklog from a Jira API response.

        Args:
            data: The worklog data from the Jira API

        Returns:
            A JiraWorklog instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        author = None
        if data.get("author"):
            author = JiraUser.from_api_response(data["author"])

        try:
            seconds = int(data.get("timeSpentSeconds", 0))
        except (TypeError, ValueError):
            seconds = 0

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            author=author,
            comment=adf_to_text(data.get("comment")),
            started=str(data.get("started", EMPTY_STRING)),
            time_spent=str(data.get("timeSpent", EMPTY_STRING)),
            time_spent_seconds=seconds,
            created=str(data.get("created", EMPTY_STRING)),
            updated=str(data.get("updated", EMPTY_STRING)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "time_spent": self.time_spent,
            "time_spent_seconds": self.time_spent_seconds,
        }
        if self.author:
            result["author"] = self.author.to_simplified_dict()
        if self.comment:
            result["comment"] = self.comment
        if self.started:
            result["started"] = self.started
        return result
