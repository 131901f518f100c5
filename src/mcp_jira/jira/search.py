"""Module for Jira search operations."""

import logging
from typing import Any

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_READ_JIRA_FIELDS, MAX_SEARCH_PAGE_SIZE

logger = logging.getLogger("mcp-jira")


def apply_projects_filter(jql: str, project_keys: list[str]) -> str:
    """
    Restrict a JQL query to the given projects.

    - Single project: adds ``project = "KEY"``
    - Multiple projects: adds ``project IN ("KEY1", "KEY2")``
    - A query that starts with ORDER BY keeps its ordering
    - A query that already filters by project is left alone
    """
    if not project_keys:
        return jql

    if len(project_keys) == 1:
        project_query = f'project = "{project_keys[0]}"'
    else:
        projects_list = ", ".join(f'"{p}"' for p in project_keys)
        project_query = f"project IN ({projects_list})"

    if not jql.strip():
        return project_query
    if jql.strip().upper().startswith("ORDER BY"):
        return f"{project_query} {jql.strip()}"
    if "project = " in jql or "project IN" in jql:
        return jql
    return f"({jql}) AND {project_query}"


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        fields: str | list[str] | None = None,
        limit: int = 50,
        next_page_token: str | None = None,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Uses the Cloud ``search/jql`` endpoint, which pages with
        ``nextPageToken``. Queries are restricted to the configured
        ``projects_filter`` when one is set.

        Args:
            jql: JQL query string (e.g. "status = Open ORDER BY created DESC")
            fields: Fields to return, as a list or comma-separated string
            limit: Maximum issues to return (capped at 100)
            next_page_token: Token from a previous page, to continue paging

        Returns:
            JiraSearchResult with the page of issues and the next token, if any

        Raises:
            ValueError: If the query is empty after applying the project filter
        """
        jql = apply_projects_filter(jql or "", self.config.project_keys).strip()
        if not jql:
            raise ValueError("JQL query cannot be empty")
        if self.config.project_keys:
            logger.info(f"Applied projects filter to query: {jql}")

        if fields is None:
            fields_list = list(DEFAULT_READ_JIRA_FIELDS)
        elif isinstance(fields, list):
            fields_list = fields
        else:
            fields_list = [f.strip() for f in fields.split(",") if f.strip()]

        request_body: dict[str, Any] = {
            "jql": jql,
            "maxResults": max(1, min(limit, MAX_SEARCH_PAGE_SIZE)),
            "fields": fields_list,
        }
        if next_page_token:
            request_body["nextPageToken"] = next_page_token

        response = self._post_api3("search/jql", data=request_body)
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from search API: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        return JiraSearchResult.from_api_response(response, **self._issue_kwargs())
