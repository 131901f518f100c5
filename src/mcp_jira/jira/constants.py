"""Constants shared by the Jira mixins."""

DEFAULT_READ_JIRA_FIELDS: tuple[str, ...] = (
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
    "project",
)

# search/jql refuses larger pages
MAX_SEARCH_PAGE_SIZE = 100
