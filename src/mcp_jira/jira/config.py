"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass
from typing import Literal

from ..utils import (
    get_env_number,
    is_atlassian_cloud_url,
    is_env_ssl_verify,
    normalize_base_url,
)

DEFAULT_TIMEOUT = 30


@dataclass
class JiraConfig:
    """Jira API configuration.

    Jira Cloud tenants authenticate with an account email and API token
    (basic auth). Server/Data Center instances may use a personal access
    token instead.
    """

    url: str  # Base URL for Jira
    auth_type: Literal["basic", "token"]  # Authentication type
    username: str | None = None  # Account email (Cloud)
    api_token: str | None = None  # API token (Cloud)
    personal_token: str | None = None  # Personal access token (Server/DC)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    projects_filter: str | None = None  # Comma-separated project keys to restrict searches
    timeout: int = DEFAULT_TIMEOUT  # Request timeout in seconds

    def __post_init__(self) -> None:
        self.url = normalize_base_url(self.url)

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
        """
        return is_atlassian_cloud_url(self.url)

    @property
    def project_keys(self) -> list[str]:
        """Project keys parsed from ``projects_filter``."""
        if not self.projects_filter:
            return []
        return [p.strip() for p in self.projects_filter.split(",") if p.strip()]

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = cls.get_url()

        username = os.getenv("JIRA_USERNAME")
        api_token = os.getenv("JIRA_API_TOKEN")
        personal_token = os.getenv("JIRA_PERSONAL_TOKEN")

        auth_type = cls._resolve_auth_type(
            url, bool(username and api_token), bool(personal_token)
        )

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
            projects_filter=os.getenv("JIRA_PROJECTS_FILTER"),
            timeout=int(get_env_number("JIRA_TIMEOUT", DEFAULT_TIMEOUT)),
        )

    @classmethod
    def from_credentials(
        cls,
        url: str,
        username: str,
        api_token: str,
        projects_filter: str | None = None,
    ) -> "JiraConfig":
        """Create a basic-auth configuration for one tenant's credentials.

        SSL verification and timeout still come from the environment so that
        operators can tune them for every tenant at once.

        Raises:
            ValueError: If the URL, username or token is empty
        """
        if not url:
            raise ValueError("Jira URL is required")
        if not (username and api_token):
            raise ValueError("Cloud authentication requires username and api_token.")

        return cls(
            url=url,
            auth_type="basic",
            username=username,
            api_token=api_token,
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
            projects_filter=projects_filter,
            timeout=int(get_env_number("JIRA_TIMEOUT", DEFAULT_TIMEOUT)),
        )

    @staticmethod
    def _resolve_auth_type(
        url: str, has_basic: bool, has_token: bool
    ) -> Literal["basic", "token"]:
        match (is_atlassian_cloud_url(url), has_basic, has_token):
            case (True, True, _):
                return "basic"
            case (True, False, _):
                msg = "Cloud authentication requires JIRA_USERNAME and JIRA_API_TOKEN"
                raise ValueError(msg)
            case (False, _, True):
                return "token"
            case (False, True, False):
                return "basic"
            case _:
                msg = "Server/Data Center authentication requires JIRA_PERSONAL_TOKEN"
                raise ValueError(msg)

    @staticmethod
    def get_url() -> str:
        """Get the Jira URL from environment variables.

        Returns:
            The Jira URL
        """
        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)
        return url

    @staticmethod
    def is_configured() -> bool:
        """Whether the environment holds a usable global Jira configuration."""
        if not os.getenv("JIRA_URL"):
            return False
        has_basic = bool(os.getenv("JIRA_USERNAME") and os.getenv("JIRA_API_TOKEN"))
        return has_basic or bool(os.getenv("JIRA_PERSONAL_TOKEN"))
