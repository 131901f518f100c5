class MCPJiraError(Exception):
    """Base exception for MCP Jira errors."""

    pass


class MCPJiraAuthenticationError(MCPJiraError):
    """Raised when Jira rejects the tenant's credentials (401/403)."""

    pass


class JiraApiError(MCPJiraError):
    """Raised when a Jira REST call fails for any reason other than authentication."""

    def __init__(
        self, message: str, status_code: int = 0, details: str | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:
        base = super().__str__()
        if self.details:
            return f"{base}: {self.details}"
        return base


class TenantResolutionError(MCPJiraError):
    """Raised when an API key cannot be resolved to Jira credentials."""

    pass
