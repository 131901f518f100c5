"""Tests for the smaller Jira models: users, comments, worklogs, transitions, links."""

from mcp_jira.models import (
    JiraComment,
    JiraIssueLinkType,
    JiraTransition,
    JiraUser,
    JiraWorklog,
)
from mcp_jira.models.constants import UNKNOWN
from tests.utils.factories import JiraCommentFactory, adf_doc, adf_paragraph


class TestJiraUser:
    def test_from_api_response(self):
        user = JiraUser.from_api_response(
            {
                "accountId": "abc-123",
                "displayName": "Jane Doe",
                "emailAddress": "jane@example.com",
                "active": True,
                "timeZone": "Europe/Berlin",
            }
        )
        assert user.account_id == "abc-123"
        assert user.email == "jane@example.com"
        assert user.to_simplified_dict() == {
            "display_name": "Jane Doe",
            "active": True,
            "account_id": "abc-123",
            "email": "jane@example.com",
        }

    def test_empty(self):
        assert JiraUser.from_api_response({}).display_name == UNKNOWN


class TestJiraComment:
    def test_adf_body_is_flattened(self):
        comment = JiraComment.from_api_response(
            JiraCommentFactory.create("42", "Looks good")
        )
        assert comment.id == "42"
        assert comment.body == "Looks good"
        assert comment.author.display_name == "Commenter"

    def test_simplified_dict(self):
        simplified = JiraComment.from_api_response(
            JiraCommentFactory.create()
        ).to_simplified_dict()
        assert simplified["body"] == "A comment"
        assert simplified["author"]["display_name"] == "Commenter"

    def test_non_dict_data(self):
        assert JiraComment.from_api_response("oops").body == ""  # type: ignore[arg-type]


class TestJiraWorklog:
    def test_from_api_response(self):
        worklog = JiraWorklog.from_api_response(
            {
                "id": 100,
                "author": {"displayName": "Dev"},
                "comment": adf_doc(adf_paragraph("Investigated")),
                "started": "2024-01-01T09:00:00.000+0000",
                "timeSpent": "1h 30m",
                "timeSpentSeconds": 5400,
            }
        )
        assert worklog.id == "100"
        assert worklog.comment == "Investigated"
        assert worklog.time_spent_seconds == 5400
        assert worklog.to_simplified_dict()["time_spent"] == "1h 30m"

    def test_bad_seconds(self):
        assert JiraWorklog.from_api_response({"timeSpentSeconds": "n/a"}).time_spent_seconds == 0


class TestJiraTransition:
    def test_from_api_response(self):
        transition = JiraTransition.from_api_response(
            {"id": "31", "name": "Done", "to": {"id": "3", "name": "Closed"}}
        )
        assert transition.to_status.name == "Closed"
        assert transition.to_simplified_dict() == {
            "id": "31",
            "name": "Done",
            "to_status": "Closed",
        }


class TestJiraIssueLinkType:
    def test_from_api_response(self):
        link_type = JiraIssueLinkType.from_api_response(
            {"id": "1000", "name": "Blocks", "inward": "is blocked by", "outward": "blocks"}
        )
        assert link_type.to_simplified_dict() == {
            "id": "1000",
            "name": "Blocks",
            "inward": "is blocked by",
            "outward": "blocks",
        }
