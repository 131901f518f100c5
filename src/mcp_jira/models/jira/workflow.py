"""
Jira workflow models.
"""

from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraStatus


class JiraTransition(ApiModel):
    """
    Model representing a workflow transition available on an issue.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    to_status: JiraStatus | None = None
    has_screen: bool = False

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTransition":
        if not data or not isinstance(data, dict):
            return cls()

        to_status = None
        if data.get("to"):
            to_status = JiraStatus.from_api_response(data["to"])

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", EMPTY_STRING)),
            to_status=to_status,
            has_screen=bool(data.get("hasScreen", False)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.to_status:
            result["to_status"] = self.to_status.name
        return result
