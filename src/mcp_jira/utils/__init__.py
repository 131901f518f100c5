"""
Utility functions for the MCP Jira integration.
"""

from .date import format_jira_datetime, parse_date
from .env import get_env_number, is_env_extended_truthy, is_env_ssl_verify, is_env_truthy
from .io import is_read_only_mode
from .logging import mask_sensitive
from .tools import get_enabled_tools, should_include_tool
from .urls import is_atlassian_cloud_url, issue_browse_url, normalize_base_url

__all__ = [
    "format_jira_datetime",
    "get_enabled_tools",
    "get_env_number",
    "is_atlassian_cloud_url",
    "is_env_extended_truthy",
    "is_env_ssl_verify",
    "is_env_truthy",
    "is_read_only_mode",
    "issue_browse_url",
    "mask_sensitive",
    "normalize_base_url",
    "parse_date",
    "should_include_tool",
]
