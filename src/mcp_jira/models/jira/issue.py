"""
Jira issue models.

This module provides Pydantic models for Jira issues.
"""

import logging
from typing import Any

from pydantic import Field

from ...utils import issue_browse_url
from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .adf import adf_to_text
from .comment import JiraComment
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser

logger = logging.getLogger(__name__)

# Fields handled explicitly; anything else requested is passed through as-is
_KNOWN_FIELDS = {
    "summary",
    "description",
    "status",
    "issuetype",
    "priority",
    "assignee",
    "reporter",
    "labels",
    "created",
    "updated",
    "parent",
    "comment",
    "project",
}


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    The description is returned by the v3 API as ADF and is stored here
    flattened to plain text.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    description: str | None = None
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    labels: list[str] = Field(default_factory=list)
    comments: list[JiraComment] = Field(default_factory=list)
    parent_key: str | None = None
    project_key: str | None = None
    url: str | None = None
    custom_fields: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``base_url`` builds the browse link; ``comment_limit``
                caps the number of embedded comments kept

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields") or {}
        key = str(data.get("key", JIRA_DEFAULT_KEY))

        def _nested(name: str, model: type[ApiModel]) -> Any:
            value = fields.get(name)
            return model.from_api_response(value) if value else None

        comments = []
        comment_data = fields.get("comment")
        if isinstance(comment_data, dict):
            comment_limit = kwargs.get("comment_limit")
            raw_comments = comment_data.get("comments", [])
            if comment_limit is not None:
                raw_comments = raw_comments[-comment_limit:] if comment_limit else []
            comments = [JiraComment.from_api_response(c) for c in raw_comments]

        parent = fields.get("parent")
        project = fields.get("project")
        base_url = kwargs.get("base_url")

        custom_fields = {
            name: value
            for name, value in fields.items()
            if name not in _KNOWN_FIELDS and value is not None
        }

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=key,
            summary=str(fields.get("summary") or EMPTY_STRING),
            description=adf_to_text(fields.get("description")),
            created=str(fields.get("created", EMPTY_STRING)),
            updated=str(fields.get("updated", EMPTY_STRING)),
            status=_nested("status", JiraStatus),
            issue_type=_nested("issuetype", JiraIssueType),
            priority=_nested("priority", JiraPriority),
            assignee=_nested("assignee", JiraUser),
            reporter=_nested("reporter", JiraUser),
            labels=list(fields.get("labels") or []),
            comments=comments,
            parent_key=parent.get("key") if isinstance(parent, dict) else None,
            project_key=project.get("key") if isinstance(project, dict) else None,
            url=issue_browse_url(base_url, key) if base_url else None,
            custom_fields=custom_fields,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
        }

        if self.url:
            result["url"] = self.url
        if self.description:
            result["description"] = self.description
        if self.status:
            result["status"] = self.status.to_simplified_dict()
        if self.issue_type:
            result["issue_type"] = self.issue_type.to_simplified_dict()
        if self.priority:
            result["priority"] = self.priority.to_simplified_dict()
        if self.assignee:
            result["assignee"] = self.assignee.to_simplified_dict()
        if self.reporter:
            result["reporter"] = self.reporter.to_simplified_dict()
        if self.labels:
            result["labels"] = self.labels
        if self.parent_key:
            result["parent"] = self.parent_key
        if self.project_key:
            result["project"] = self.project_key
        if self.created:
            result["created"] = self.created
        if self.updated:
            result["updated"] = self.updated
        if self.comments:
            result["comments"] = [c.to_simplified_dict() for c in self.comments]
        for name, value in self.custom_fields.items():
            result[name] = value

        return result
