"""
Common Jira entity models.

Small value objects shared by issues, comments and worklogs.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN

logger = logging.getLogger(__name__)


class JiraUser(ApiModel):
    """
    Model representing a Jira Cloud user.
    """

    account_id: str | None = None
    display_name: str = UNKNOWN
    email: str | None = None
    active: bool = True
    time_zone: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            account_id=data.get("accountId"),
            display_name=str(data.get("displayName", UNKNOWN)),
            email=data.get("emailAddress"),
            active=bool(data.get("active", True)),
            time_zone=data.get("timeZone"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "display_name": self.display_name,
            "active": self.active,
        }
        if self.account_id:
            result["account_id"] = self.account_id
        if self.email:
            result["email"] = self.email
        return result


class JiraStatus(ApiModel):
    """
    Model representing a Jira issue status.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    category: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraStatus":
        if not data or not isinstance(data, dict):
            return cls()

        category = None
        category_data = data.get("statusCategory")
        if isinstance(category_data, dict):
            category = category_data.get("name")

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", UNKNOWN)),
            category=category,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.category:
            result["category"] = self.category
        return result


class JiraIssueType(ApiModel):
    """
    Model representing a Jira issue type.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    subtask: bool = False

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueType":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", UNKNOWN)),
            subtask=bool(data.get("subtask", False)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"name": self.name}


class JiraPriority(ApiModel):
    """
    Model representing a Jira priority.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraPriority":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", EMPTY_STRING)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"name": self.name}
