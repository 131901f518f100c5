"""Module for Jira user operations."""

import logging

from ..models import JiraUser
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_current_user(self) -> JiraUser:
        """
        Get the user the configured credentials belong to.

        Returns:
            The authenticated user
        """
        response = self._get_api3("myself")
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from myself API: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        user = JiraUser.from_api_response(response)
        self._current_user_account_id = user.account_id
        return user
