"""Base client module for Jira API interactions."""

import logging
from typing import Any

from atlassian import Jira

from ..adf import text_to_adf
from ..utils import mask_sensitive
from ..utils.decorators import handle_jira_api_errors
from .config import JiraConfig

# Configure logging
logger = logging.getLogger("mcp-jira")

API3_PREFIX = "rest/api/3"


class JiraClient:
    """Base client for Jira Cloud REST API v3 interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            ValueError: If the environment holds no usable configuration.
        """
        if config is None:
            self.config = JiraConfig.from_env()
        else:
            self.config = config

        # Initialize the Jira client based on auth type
        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
            )

        logger.debug(
            f"Jira client ready for {self.config.url} "
            f"(auth={self.config.auth_type}, "
            f"user={mask_sensitive(self.config.username or '', keep_chars=3)})"
        )

        self._current_user_account_id: str | None = None

    @staticmethod
    def _api3_path(path: str) -> str:
        return f"{API3_PREFIX}/{path.lstrip('/')}"

    @handle_jira_api_errors("Jira API")
    def _get_api3(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a REST API v3 resource, e.g. ``issue/PROJ-1``."""
        return self.jira.get(self._api3_path(path), params=params)

    @handle_jira_api_errors("Jira API")
    def _post_api3(self, path: str, data: dict[str, Any] | None = None) -> Any:
        """POST a JSON body to a REST API v3 resource."""
        return self.jira.post(self._api3_path(path), data=data)

    @handle_jira_api_errors("Jira API")
    def _put_api3(self, path: str, data: dict[str, Any] | None = None) -> Any:
        """PUT a JSON body to a REST API v3 resource."""
        return self.jira.put(self._api3_path(path), data=data)

    def _to_adf(self, text: str) -> dict[str, Any]:
        """Build the ADF body for a description, comment or worklog comment.

        Markdown is converted; plain prose is wrapped as a single paragraph.
        """
        return text_to_adf(text)

    def _issue_kwargs(self) -> dict[str, Any]:
        return {"base_url": self.config.url}
