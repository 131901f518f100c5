"""Tests for the Jira issues mixin."""

import pytest

from mcp_jira.jira.constants import DEFAULT_READ_JIRA_FIELDS
from mcp_jira.models import JiraIssue
from tests.utils.factories import JiraIssueFactory


class TestGetIssue:
    def test_default_fields_include_comments(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = JiraIssueFactory.create("PROJ-1")

        issue = jira_fetcher.get_issue("PROJ-1")

        assert isinstance(issue, JiraIssue)
        assert issue.key == "PROJ-1"
        assert issue.url == "https://test.atlassian.net/browse/PROJ-1"
        mock_atlassian_jira.get.assert_called_once_with(
            "rest/api/3/issue/PROJ-1",
            params={"fields": ",".join([*DEFAULT_READ_JIRA_FIELDS, "comment"])},
        )

    def test_no_comments_requested_when_limit_is_zero(
        self, jira_fetcher, mock_atlassian_jira
    ):
        mock_atlassian_jira.get.return_value = JiraIssueFactory.create("PROJ-1")

        jira_fetcher.get_issue("PROJ-1", comment_limit=0)

        params = mock_atlassian_jira.get.call_args.kwargs["params"]
        assert "comment" not in params["fields"].split(",")

    def test_explicit_fields_and_expand(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = JiraIssueFactory.create("PROJ-1")

        jira_fetcher.get_issue("PROJ-1", fields=["summary", "status"], expand="changelog")

        mock_atlassian_jira.get.assert_called_once_with(
            "rest/api/3/issue/PROJ-1",
            params={"fields": "summary,status", "expand": "changelog"},
        )

    def test_unexpected_response_type(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = "not a dict"

        with pytest.raises(TypeError, match="Unexpected return value type"):
            jira_fetcher.get_issue("PROJ-1")


class TestCreateIssue:
    def test_markdown_description_is_sent_as_adf(
        self, jira_fetcher, mock_atlassian_jira
    ):
        mock_atlassian_jira.post.return_value = {"id": "10001", "key": "PROJ-2"}
        mock_atlassian_jira.get.return_value = JiraIssueFactory.create("PROJ-2")

        issue = jira_fetcher.create_issue(
            project_key="PROJ",
            summary="New bug",
            issue_type="Bug",
            description="## Finding\n\n- Item 1",
            assignee="acc-1",
            labels=["security"],
            priority="High",
        )

        assert issue.key == "PROJ-2"
        path = mock_atlassian_jira.post.call_args.args[0]
        fields = mock_atlassian_jira.post.call_args.kwargs["data"]["fields"]
        assert path == "rest/api/3/issue"
        assert fields["project"] == {"key": "PROJ"}
        assert fields["issuetype"] == {"name": "Bug"}
        assert fields["assignee"] == {"accountId": "acc-1"}
        assert fields["labels"] == ["security"]
        assert fields["priority"] == {"name": "High"}
        assert fields["description"]["type"] == "doc"
        assert fields["description"]["version"] == 1
        assert [n["type"] for n in fields["description"]["content"]] == [
            "heading",
            "bulletList",
        ]

    def test_plain_description_and_extra_fields(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.post.return_value = {"key": "PROJ-3"}
        mock_atlassian_jira.get.return_value = JiraIssueFactory.create("PROJ-3")

        jira_fetcher.create_issue(
            project_key="PROJ",
            summary="Subtask",
            issue_type="Sub-task",
            description="Plain words only",
            parent_key="PROJ-1",
            customfield_10010="Sprint 3",
        )

        fields = mock_atlassian_jira.post.call_args.kwargs["data"]["fields"]
        assert fields["parent"] == {"key": "PROJ-1"}
        assert fields["customfield_10010"] == "Sprint 3"
        assert fields["description"]["content"] == [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": "Plain words only"}],
            }
        ]

    def test_no_description_field_when_empty(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.post.return_value = {"key": "PROJ-4"}
        mock_atlassian_jira.get.return_value = JiraIssueFactory.create("PROJ-4")

        jira_fetcher.create_issue("PROJ", "No body", "Task")

        fields = mock_atlassian_jira.post.call_args.kwargs["data"]["fields"]
        assert "description" not in fields

    @pytest.mark.parametrize(
        "args",
        [("", "s", "Task"), ("PROJ", "", "Task"), ("PROJ", "s", "")],
    )
    def test_required_arguments(self, jira_fetcher, mock_atlassian_jira, args):
        with pytest.raises(ValueError):
            jira_fetcher.create_issue(*args)
        mock_atlassian_jira.post.assert_not_called()


class TestUpdateIssue:
    def test_only_given_fields_are_sent(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = JiraIssueFactory.create("PROJ-1")

        jira_fetcher.update_issue("PROJ-1", summary="Renamed", labels=[])

        mock_atlassian_jira.put.assert_called_once_with(
            "rest/api/3/issue/PROJ-1",
            data={"fields": {"summary": "Renamed", "labels": []}},
        )

    def test_description_converted(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = JiraIssueFactory.create("PROJ-1")

        jira_fetcher.update_issue("PROJ-1", description="**urgent**")

        description = mock_atlassian_jira.put.call_args.kwargs["data"]["fields"][
            "description"
        ]
        assert description["content"][0]["content"] == [
            {"type": "text", "text": "urgent", "marks": [{"type": "strong"}]}
        ]

    def test_nothing_to_update(self, jira_fetcher, mock_atlassian_jira):
        with pytest.raises(ValueError, match="No fields to update"):
            jira_fetcher.update_issue("PROJ-1")
        mock_atlassian_jira.put.assert_not_called()
