"""
Jira issue link models.
"""

from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID


class JiraIssueLinkType(ApiModel):
    """
    Model representing a Jira issue link type (e.g. Blocks, Relates).
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    inward: str = EMPTY_STRING
    outward: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueLinkType":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", EMPTY_STRING)),
            inward=str(data.get("inward", EMPTY_STRING)),
            outward=str(data.get("outward", EMPTY_STRING)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "inward": self.inward,
            "outward": self.outward,
        }
