"""Module for Jira transition operations."""

import logging
from typing import Any

from ..models import JiraIssue, JiraTransition
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the status transitions currently available for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Available transitions with their target status
        """
        response = self._get_api3(f"issue/{issue_key}/transitions")
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from transitions API: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        return [
            JiraTransition.from_api_response(transition)
            for transition in response.get("transitions", [])
            if isinstance(transition, dict)
        ]

    def transition_issue(
        self,
        issue_key: str,
        transition_id: str,
        comment: str | None = None,
    ) -> JiraIssue:
        """
        Move an issue through a workflow transition.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: ID of the transition (see ``get_transitions``)
            comment: Optional comment added with the transition

        Returns:
            The issue after the transition
        """
        data: dict[str, Any] = {"transition": {"id": str(transition_id)}}
        if comment:
            data["update"] = {"comment": [{"add": {"body": self._to_adf(comment)}}]}

        self._post_api3(f"issue/{issue_key}/transitions", data=data)
        logger.info(f"Applied transition {transition_id} to issue {issue_key}")
        return self.get_issue(issue_key)  # type: ignore[attr-defined]
