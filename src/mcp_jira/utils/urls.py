"""URL-related utility functions for MCP Jira."""

import re
from urllib.parse import urlparse

# Private network hosts are always Server/Data Center, never Cloud
_PRIVATE_HOST_RE = re.compile(
    r"^(localhost$|127\.|10\.|192\.168\.|172\.(1[6-9]|2[0-9]|3[0-1])\.)"
)

_CLOUD_DOMAINS = (
    ".atlassian.net",
    ".jira.com",
    ".jira-dev.com",
    "api.atlassian.com",
    ".atlassian-us-gov-mod.net",  # US Gov Moderate (FedRAMP)
    ".atlassian-us-gov.net",  # US Gov (FedRAMP)
)


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud.

    Args:
        url: The URL to check

    Returns:
        True for Atlassian Cloud hosts, False for Server/Data Center or empty input
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""
    if _PRIVATE_HOST_RE.match(hostname):
        return False
    return any(domain in hostname for domain in _CLOUD_DOMAINS)


def normalize_base_url(url: str) -> str:
    """Strip whitespace and trailing slashes from a site URL."""
    return url.strip().rstrip("/")


def issue_browse_url(base_url: str, issue_key: str) -> str:
    """Build the human-facing ``/browse/KEY`` link for an issue."""
    return f"{normalize_base_url(base_url)}/browse/{issue_key}"
