"""I/O utility functions for MCP Jira."""

from .env import is_env_extended_truthy


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode hides and blocks every tool tagged ``write`` (create,
    update, comment, worklog, transition, link) while keeping reads
    available.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    return is_env_extended_truthy("READ_ONLY_MODE", "false")
