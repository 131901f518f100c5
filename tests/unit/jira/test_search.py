"""Tests for the Jira search mixin."""

import pytest

from mcp_jira.jira.constants import DEFAULT_READ_JIRA_FIELDS
from mcp_jira.jira.search import apply_projects_filter
from tests.utils.factories import JiraIssueFactory


class TestApplyProjectsFilter:
    @pytest.mark.parametrize(
        "jql,keys,expected",
        [
            ("status = Open", [], "status = Open"),
            ("status = Open", ["PROJ"], '(status = Open) AND project = "PROJ"'),
            (
                "status = Open",
                ["A", "B"],
                '(status = Open) AND project IN ("A", "B")',
            ),
            ("", ["PROJ"], 'project = "PROJ"'),
            (
                "ORDER BY created DESC",
                ["PROJ"],
                'project = "PROJ" ORDER BY created DESC',
            ),
            ("project = OTHER", ["PROJ"], "project = OTHER"),
            ("project IN (X, Y)", ["PROJ"], "project IN (X, Y)"),
        ],
    )
    def test_filter(self, jql, keys, expected):
        assert apply_projects_filter(jql, keys) == expected


class TestSearchIssues:
    def test_request_body(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.post.return_value = {
            "issues": [JiraIssueFactory.create("PROJ-1")],
            "nextPageToken": "next",
            "isLast": False,
        }

        result = jira_fetcher.search_issues("status = Open", limit=5)

        mock_atlassian_jira.post.assert_called_once_with(
            "rest/api/3/search/jql",
            data={
                "jql": "status = Open",
                "maxResults": 5,
                "fields": list(DEFAULT_READ_JIRA_FIELDS),
            },
        )
        assert result.total == 1
        assert result.issues[0].url == "https://test.atlassian.net/browse/PROJ-1"
        assert result.next_page_token == "next"

    def test_page_token_and_fields(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.post.return_value = {"issues": []}

        jira_fetcher.search_issues(
            "status = Open", fields="summary, status", next_page_token="tok"
        )

        data = mock_atlassian_jira.post.call_args.kwargs["data"]
        assert data["fields"] == ["summary", "status"]
        assert data["nextPageToken"] == "tok"

    @pytest.mark.parametrize("limit,expected", [(0, 1), (500, 100), (42, 42)])
    def test_limit_is_clamped(self, jira_fetcher, mock_atlassian_jira, limit, expected):
        mock_atlassian_jira.post.return_value = {"issues": []}

        jira_fetcher.search_issues("status = Open", limit=limit)

        assert mock_atlassian_jira.post.call_args.kwargs["data"]["maxResults"] == expected

    def test_projects_filter_applied(self, make_fetcher, mock_atlassian_jira):
        fetcher = make_fetcher(projects_filter="PROJ, OPS")
        mock_atlassian_jira.post.return_value = {"issues": []}

        fetcher.search_issues("assignee = currentUser()")

        assert (
            mock_atlassian_jira.post.call_args.kwargs["data"]["jql"]
            == '(assignee = currentUser()) AND project IN ("PROJ", "OPS")'
        )

    def test_empty_query(self, jira_fetcher, mock_atlassian_jira):
        with pytest.raises(ValueError, match="JQL query cannot be empty"):
            jira_fetcher.search_issues("   ")
        mock_atlassian_jira.post.assert_not_called()
