"""Module for Jira worklog operations."""

import logging
from datetime import datetime
from typing import Any

from ..models import JiraWorklog
from ..utils import format_jira_datetime
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class WorklogMixin(JiraClient):
    """Mixin for Jira worklog operations."""

    def get_worklogs(self, issue_key: str) -> list[JiraWorklog]:
        """
        Get the worklogs recorded on an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Worklog entries, oldest first
        """
        response = self._get_api3(f"issue/{issue_key}/worklog")
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from worklog API: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        return [
            JiraWorklog.from_api_response(worklog)
            for worklog in response.get("worklogs", [])
        ]

    def add_worklog(
        self,
        issue_key: str,
        time_spent: str,
        comment: str | None = None,
        started: str | datetime | None = None,
    ) -> JiraWorklog:
        """
        Log time against an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            time_spent: Jira duration string (e.g. '1h 30m', '2d')
            comment: Optional comment; Markdown is converted to ADF
            started: When the work started, as a datetime or any date string
                dateutil understands. Defaults to now (UTC).

        Returns:
            The created worklog entry
        """
        if not time_spent:
            raise ValueError("time_spent is required (e.g. '1h 30m')")

        try:
            started_at = format_jira_datetime(started)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Could not parse start time: {started}") from e

        data: dict[str, Any] = {"timeSpent": time_spent, "started": started_at}
        if comment:
            data["comment"] = self._to_adf(comment)

        result = self._post_api3(f"issue/{issue_key}/worklog", data=data)
        if not isinstance(result, dict):
            msg = f"Unexpected return value type from worklog API: {type(result)}"
            logger.error(msg)
            raise TypeError(msg)

        logger.info(f"Logged {time_spent} on issue {issue_key}")
        return JiraWorklog.from_api_response(result)
