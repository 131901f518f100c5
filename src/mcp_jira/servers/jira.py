"""Jira FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.adf import text_to_adf
from mcp_jira.jira.constants import DEFAULT_READ_JIRA_FIELDS
from mcp_jira.servers.dependencies import get_jira_fetcher
from mcp_jira.utils.decorators import check_write_access

logger = logging.getLogger("mcp-jira.server.jira")

ISSUE_KEY_PATTERN = r"^[A-Z][A-Z0-9]+-\d+$"
PROJECT_KEY_PATTERN = r"^[A-Z][A-Z0-9]+$"

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions=(
        "Provides tools for Jira Cloud. Descriptions and comments written in "
        "Markdown are converted to Atlassian Document Format."
    ),
)


def _dumps(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _parse_json_object(value: str | None, field_name: str) -> dict[str, Any] | None:
    """Parse an optional JSON-object argument.

    Raises:
        ValueError: If the input is not valid JSON or not an object.
    """
    if value is None:
        return None
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError(f"{field_name} is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise ValueError(f"{field_name} must be a JSON object.")
    return parsed


def _split_csv(value: str | None) -> list[str] | None:
    if not value:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Issue", "readOnlyHint": True},
)
async def get_issue(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(
            description="Jira issue key (e.g., 'PROJ-123')",
            pattern=ISSUE_KEY_PATTERN,
        ),
    ],
    fields: Annotated[
        str,
        Field(
            description=(
                "(Optional) Comma-separated list of fields to return "
                "(e.g., 'summary,status,customfield_10010'). Use '*all' for all fields."
            ),
        ),
    ] = ",".join(DEFAULT_READ_JIRA_FIELDS),
    expand: Annotated[
        str | None,
        Field(description="(Optional) Fields to expand, e.g. 'changelog'"),
    ] = None,
    comment_limit: Annotated[
        int,
        Field(
            description="Maximum number of comments to include (0 for no comments)",
            ge=0,
            le=100,
        ),
    ] = 10,
) -> str:
    """Get details of a specific Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        fields: Comma-separated list of fields to return.
        expand: Optional fields to expand.
        comment_limit: Maximum number of comments.

    Returns:
        JSON string representing the Jira issue object.
    """
    jira = await get_jira_fetcher(ctx)
    field_list = _split_csv(fields)
    if field_list is not None and comment_limit and "comment" not in field_list:
        field_list.append("comment")
    issue = jira.get_issue(
        issue_key, fields=field_list, expand=expand, comment_limit=comment_limit
    )
    return _dumps(issue.to_simplified_dict())


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Search Issues", "readOnlyHint": True},
)
async def search(
    ctx: Context,
    jql: Annotated[
        str,
        Field(
            description=(
                "JQL query string. Examples:\n"
                "- \"status = 'In Progress' AND project = PROJ\"\n"
                '- "assignee = currentUser() ORDER BY updated DESC"'
            )
        ),
    ],
    fields: Annotated[
        str,
        Field(description="(Optional) Comma-separated fields to return"),
    ] = ",".join(DEFAULT_READ_JIRA_FIELDS),
    limit: Annotated[
        int,
        Field(description="Maximum number of results (1-100)", ge=1, le=100),
    ] = 10,
    next_page_token: Annotated[
        str | None,
        Field(description="(Optional) Token from a previous result to fetch the next page"),
    ] = None,
) -> str:
    """Search Jira issues using JQL (Jira Query Language).

    Returns:
        JSON string with the issues and, when more results exist, next_page_token.
    """
    jira = await get_jira_fetcher(ctx)
    result = jira.search_issues(
        jql, fields=_split_csv(fields), limit=limit, next_page_token=next_page_token
    )
    return _dumps(result.to_simplified_dict())


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Create Issue", "destructiveHint": False},
)
@check_write_access
async def create_issue(
    ctx: Context,
    project_key: Annotated[
        str,
        Field(description="The project key (e.g. 'PROJ')", pattern=PROJECT_KEY_PATTERN),
    ],
    summary: Annotated[str, Field(description="Summary (title) of the issue")],
    issue_type: Annotated[
        str, Field(description="Issue type (e.g. 'Task', 'Bug', 'Story', 'Subtask')")
    ],
    description: Annotated[
        str, Field(description="Issue description; Markdown is supported")
    ] = "",
    assignee: Annotated[
        str | None, Field(description="(Optional) Account ID of the assignee")
    ] = None,
    labels: Annotated[
        str | None, Field(description="(Optional) Comma-separated labels")
    ] = None,
    priority: Annotated[
        str | None, Field(description="(Optional) Priority name, e.g. 'High'")
    ] = None,
    parent_key: Annotated[
        str | None,
        Field(description="(Optional) Parent issue key for subtasks"),
    ] = None,
    additional_fields: Annotated[
        str | None,
        Field(
            description=(
                "(Optional) JSON object of extra fields, e.g. "
                '\'{"customfield_10010": "value"}\''
            )
        ),
    ] = None,
) -> str:
    """Create a new Jira issue.

    Returns:
        JSON string representing the created issue object.

    Raises:
        ValueError: If in read-only mode or Jira client unavailable.
    """
    jira = await get_jira_fetcher(ctx)
    extra = _parse_json_object(additional_fields, "additional_fields") or {}
    issue = jira.create_issue(
        project_key=project_key,
        summary=summary,
        issue_type=issue_type,
        description=description,
        assignee=assignee,
        labels=_split_csv(labels),
        priority=priority,
        parent_key=parent_key,
        **extra,
    )
    return _dumps(
        {"message": "Issue created successfully", "issue": issue.to_simplified_dict()}
    )


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Update Issue", "destructiveHint": True},
)
@check_write_access
async def update_issue(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(description="Jira issue key (e.g., 'PROJ-123')", pattern=ISSUE_KEY_PATTERN),
    ],
    summary: Annotated[str | None, Field(description="(Optional) New summary")] = None,
    description: Annotated[
        str | None,
        Field(description="(Optional) New description; Markdown is supported"),
    ] = None,
    labels: Annotated[
        str | None,
        Field(description="(Optional) Comma-separated labels replacing the current ones"),
    ] = None,
    priority: Annotated[
        str | None, Field(description="(Optional) New priority name")
    ] = None,
    additional_fields: Annotated[
        str | None,
        Field(description="(Optional) JSON object of extra fields to set"),
    ] = None,
) -> str:
    """Update fields of an existing Jira issue.

    Returns:
        JSON string representing the updated issue object.
    """
    jira = await get_jira_fetcher(ctx)
    extra = _parse_json_object(additional_fields, "additional_fields") or {}
    label_list = _split_csv(labels) if labels is not None else None
    issue = jira.update_issue(
        issue_key,
        summary=summary,
        description=description,
        labels=label_list,
        priority=priority,
        **extra,
    )
    return _dumps(
        {"message": "Issue updated successfully", "issue": issue.to_simplified_dict()}
    )


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Add Comment", "destructiveHint": False},
)
@check_write_access
async def add_comment(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(description="Jira issue key (e.g., 'PROJ-123')", pattern=ISSUE_KEY_PATTERN),
    ],
    comment: Annotated[str, Field(description="Comment text in Markdown format")],
    visibility: Annotated[
        str | None,
        Field(
            description=(
                "(Optional) Comment visibility as JSON string "
                '(e.g. \'{"type":"group","value":"jira-users"}\')'
            )
        ),
    ] = None,
) -> str:
    """Add a comment to a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        comment: Comment text in Markdown.
        visibility: (Optional) Comment visibility as JSON string.

    Returns:
        JSON string representing the added comment object.

    Raises:
        ValueError: If in read-only mode or Jira client unavailable.
    """
    jira = await get_jira_fetcher(ctx)
    visibility_dict = _parse_json_object(visibility, "visibility")
    result = jira.add_comment(issue_key, comment, visibility_dict)
    return _dumps(result.to_simplified_dict())


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Comments", "readOnlyHint": True},
)
async def get_comments(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(description="Jira issue key (e.g., 'PROJ-123')", pattern=ISSUE_KEY_PATTERN),
    ],
    limit: Annotated[
        int, Field(description="Maximum number of comments", ge=1, le=100)
    ] = 50,
) -> str:
    """Get the comments of a Jira issue."""
    jira = await get_jira_fetcher(ctx)
    comments = jira.get_issue_comments(issue_key, limit=limit)
    return _dumps({"comments": [c.to_simplified_dict() for c in comments]})


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Add Worklog", "destructiveHint": False},
)
@check_write_access
async def add_worklog(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(description="Jira issue key (e.g., 'PROJ-123')", pattern=ISSUE_KEY_PATTERN),
    ],
    time_spent: Annotated[
        str,
        Field(description="Time spent in Jira format, e.g. '1h 30m', '1d', '45m'"),
    ],
    comment: Annotated[
        str | None,
        Field(description="(Optional) Worklog comment; Markdown is supported"),
    ] = None,
    started: Annotated[
        str | None,
        Field(
            description=(
                "(Optional) When the work started, ISO 8601 "
                "(e.g. '2024-01-01T09:00:00Z'). Defaults to now."
            )
        ),
    ] = None,
) -> str:
    """Add a worklog entry to a Jira issue.

    Returns:
        JSON string representing the created worklog.
    """
    jira = await get_jira_fetcher(ctx)
    worklog = jira.add_worklog(
        issue_key, time_spent=time_spent, comment=comment, started=started
    )
    return _dumps(
        {"message": "Worklog added successfully", "worklog": worklog.to_simplified_dict()}
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Worklog", "readOnlyHint": True},
)
async def get_worklog(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(description="Jira issue key (e.g., 'PROJ-123')", pattern=ISSUE_KEY_PATTERN),
    ],
) -> str:
    """Get worklog entries for a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        JSON string representing the worklog entries.
    """
    jira = await get_jira_fetcher(ctx)
    worklogs = jira.get_worklogs(issue_key)
    return _dumps({"worklogs": [w.to_simplified_dict() for w in worklogs]})


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Transitions", "readOnlyHint": True},
)
async def get_transitions(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(description="Jira issue key (e.g., 'PROJ-123')", pattern=ISSUE_KEY_PATTERN),
    ],
) -> str:
    """Get available status transitions for a Jira issue.

    Returns:
        JSON string representing a list of available transitions.
    """
    jira = await get_jira_fetcher(ctx)
    transitions = jira.get_transitions(issue_key)
    return _dumps([t.to_simplified_dict() for t in transitions])


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Transition Issue", "destructiveHint": True},
)
@check_write_access
async def transition_issue(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(description="Jira issue key (e.g., 'PROJ-123')", pattern=ISSUE_KEY_PATTERN),
    ],
    transition_id: Annotated[
        str,
        Field(description="ID of the transition, see get_transitions"),
    ],
    comment: Annotated[
        str | None,
        Field(description="(Optional) Comment added with the transition"),
    ] = None,
) -> str:
    """Transition a Jira issue to a new status.

    Returns:
        JSON string representing the issue after the transition.
    """
    jira = await get_jira_fetcher(ctx)
    issue = jira.transition_issue(issue_key, transition_id, comment=comment)
    return _dumps(
        {
            "message": f"Issue {issue_key} transitioned successfully",
            "issue": issue.to_simplified_dict(),
        }
    )


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Create Issue Link", "destructiveHint": False},
)
@check_write_access
async def create_issue_link(
    ctx: Context,
    link_type: Annotated[
        str,
        Field(description="Link type name, e.g. 'Blocks', 'Relates', 'Duplicate'"),
    ],
    inward_issue_key: Annotated[
        str,
        Field(description="Inward issue key (e.g. 'PROJ-1')", pattern=ISSUE_KEY_PATTERN),
    ],
    outward_issue_key: Annotated[
        str,
        Field(description="Outward issue key (e.g. 'PROJ-2')", pattern=ISSUE_KEY_PATTERN),
    ],
    comment: Annotated[
        str | None, Field(description="(Optional) Comment to add to the link")
    ] = None,
) -> str:
    """Create a link between two Jira issues."""
    jira = await get_jira_fetcher(ctx)
    result = jira.create_issue_link(
        link_type, inward_issue_key, outward_issue_key, comment=comment
    )
    return _dumps(result)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Issue Link Types", "readOnlyHint": True},
)
async def get_link_types(ctx: Context) -> str:
    """Get all available issue link types."""
    jira = await get_jira_fetcher(ctx)
    link_types = jira.get_link_types()
    return _dumps([lt.to_simplified_dict() for lt in link_types])


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Current User", "readOnlyHint": True},
)
async def get_current_user(ctx: Context) -> str:
    """Get the Jira user the current credentials belong to."""
    jira = await get_jira_fetcher(ctx)
    user = jira.get_current_user()
    return _dumps(user.to_simplified_dict())


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Convert Markdown to ADF", "readOnlyHint": True},
)
async def convert_markdown(
    ctx: Context,
    text: Annotated[
        str,
        Field(description="Text to convert, as it would be sent in a description or comment"),
    ],
) -> str:
    """Preview the Atlassian Document Format body the server would send for a text.

    No Jira call is made.

    Returns:
        JSON string of the ADF document.
    """
    return _dumps(text_to_adf(text))
