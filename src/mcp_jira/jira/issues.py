"""Module for Jira issue operations."""

import logging
from typing import Any

from ..models import JiraIssue
from .client import JiraClient
from .constants import DEFAULT_READ_JIRA_FIELDS

logger = logging.getLogger("mcp-jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(
        self,
        issue_key: str,
        fields: str | list[str] | None = None,
        expand: str | None = None,
        comment_limit: int | None = 10,
    ) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            fields: Fields to return, as a list or comma-separated string.
                Defaults to the common read fields plus comments.
            expand: Optional comma-separated items to expand (e.g. 'changelog')
            comment_limit: Maximum number of most recent comments to keep;
                0 drops them, None keeps all that Jira returned

        Returns:
            JiraIssue model with the description flattened to text
        """
        if fields is None:
            fields_list = [*DEFAULT_READ_JIRA_FIELDS]
            if comment_limit != 0:
                fields_list.append("comment")
            fields_param = ",".join(fields_list)
        elif isinstance(fields, list):
            fields_param = ",".join(fields)
        else:
            fields_param = fields

        params: dict[str, Any] = {"fields": fields_param}
        if expand:
            params["expand"] = expand

        issue = self._get_api3(f"issue/{issue_key}", params=params)
        if not isinstance(issue, dict):
            msg = f"Unexpected return value type from issue API: {type(issue)}"
            logger.error(msg)
            raise TypeError(msg)

        return JiraIssue.from_api_response(
            issue, comment_limit=comment_limit, **self._issue_kwargs()
        )

    def create_issue(
        self,
        project_key: str,
        summary: str,
        issue_type: str,
        description: str = "",
        assignee: str | None = None,
        labels: list[str] | None = None,
        priority: str | None = None,
        parent_key: str | None = None,
        **kwargs: Any,
    ) -> JiraIssue:
        """
        Create a new Jira issue.

        Args:
            project_key: The key of the project (e.g. 'PROJ')
            summary: Summary of the issue
            issue_type: Issue type name (e.g. 'Task', 'Bug', 'Story')
            description: Issue description; Markdown is converted to ADF
            assignee: Account ID of the assignee
            labels: Labels to set
            priority: Priority name (e.g. 'High')
            parent_key: Parent issue key, for subtasks
            **kwargs: Additional raw fields (e.g. custom fields)

        Returns:
            The created issue, re-read from Jira

        Raises:
            ValueError: If a required argument is empty
        """
        if not project_key:
            raise ValueError("Project key is required")
        if not summary:
            raise ValueError("Summary is required")
        if not issue_type:
            raise ValueError("Issue type is required")

        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": summary,
            "issuetype": {"name": issue_type},
        }
        if description:
            fields["description"] = self._to_adf(description)
        if assignee:
            fields["assignee"] = {"accountId": assignee}
        if labels:
            fields["labels"] = labels
        if priority:
            fields["priority"] = {"name": priority}
        if parent_key:
            fields["parent"] = {"key": parent_key}
        fields.update(kwargs)

        result = self._post_api3("issue", data={"fields": fields})
        if not isinstance(result, dict) or "key" not in result:
            msg = f"Unexpected return value from issue creation: {result!r}"
            logger.error(msg)
            raise TypeError(msg)

        logger.info(f"Created issue {result['key']} in project {project_key}")
        return self.get_issue(result["key"])

    def update_issue(
        self,
        issue_key: str,
        summary: str | None = None,
        description: str | None = None,
        labels: list[str] | None = None,
        priority: str | None = None,
        **kwargs: Any,
    ) -> JiraIssue:
        """
        Update fields of an existing issue.

        Only the arguments that are not None are sent. The description is
        converted to ADF the same way as on creation.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            summary: New summary
            description: New description
            labels: Replacement label list
            priority: New priority name
            **kwargs: Additional raw fields

        Returns:
            The updated issue

        Raises:
            ValueError: If nothing would be updated
        """
        fields: dict[str, Any] = {}
        if summary is not None:
            fields["summary"] = summary
        if description is not None:
            fields["description"] = self._to_adf(description)
        if labels is not None:
            fields["labels"] = labels
        if priority is not None:
            fields["priority"] = {"name": priority}
        fields.update(kwargs)

        if not fields:
            raise ValueError(f"No fields to update for issue {issue_key}")

        self._put_api3(f"issue/{issue_key}", data={"fields": fields})
        logger.info(f"Updated fields {sorted(fields)} on issue {issue_key}")
        return self.get_issue(issue_key)
