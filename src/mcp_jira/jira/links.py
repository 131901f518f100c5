"""Module for Jira issue link operations."""

import logging
from typing import Any

from ..models.jira import JiraIssueLinkType
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    def get_link_types(self) -> list[JiraIssueLinkType]:
        """
        Get all available issue link types.

        Returns:
            List of JiraIssueLinkType objects
        """
        response = self._get_api3("issueLinkType")
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from link type API: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        return [
            JiraIssueLinkType.from_api_response(link_type)
            for link_type in response.get("issueLinkTypes", [])
        ]

    def create_issue_link(
        self,
        link_type: str,
        inward_issue_key: str,
        outward_issue_key: str,
        comment: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a link between two issues.

        Args:
            link_type: Link type name (e.g. 'Blocks', 'Relates')
            inward_issue_key: Key of the inward issue (e.g. the blocked one)
            outward_issue_key: Key of the outward issue
            comment: Optional comment added to the inward issue

        Returns:
            Dictionary describing the created link
        """
        if not link_type:
            raise ValueError("Link type is required")
        if not inward_issue_key or not outward_issue_key:
            raise ValueError("Both inward and outward issue keys are required")

        data: dict[str, Any] = {
            "type": {"name": link_type},
            "inwardIssue": {"key": inward_issue_key},
            "outwardIssue": {"key": outward_issue_key},
        }
        if comment:
            data["comment"] = {"body": self._to_adf(comment)}

        self._post_api3("issueLink", data=data)
        logger.info(
            f"Linked {inward_issue_key} -> {outward_issue_key} ({link_type})"
        )
        return {
            "success": True,
            "message": f"Link created between {inward_issue_key} and {outward_issue_key}",
            "link_type": link_type,
            "inward_issue": inward_issue_key,
            "outward_issue": outward_issue_key,
        }
