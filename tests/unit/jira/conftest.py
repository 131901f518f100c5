"""
Test fixtures for Jira unit tests.

The atlassian ``Jira`` REST client is replaced by a MagicMock so the mixins
can be exercised without network access.
"""

from unittest.mock import MagicMock, patch

import pytest

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(projects_filter="PROJ")
    """

    def _create_config(**overrides):
        defaults = {
            "url": "https://test.atlassian.net",
            "auth_type": "basic",
            "username": "test@example.com",
            "api_token": "test-api-token",
        }
        defaults.update(overrides)
        return JiraConfig(**defaults)

    return _create_config


@pytest.fixture
def jira_config(jira_config_factory):
    return jira_config_factory()


@pytest.fixture
def mock_atlassian_jira():
    """Patch the atlassian Jira class used by JiraClient and yield the instance mock."""
    with patch("mcp_jira.jira.client.Jira") as mock_jira_class:
        instance = MagicMock()
        mock_jira_class.return_value = instance
        yield instance


@pytest.fixture
def jira_fetcher(jira_config, mock_atlassian_jira):
    """A JiraFetcher whose REST calls go to ``mock_atlassian_jira``."""
    return JiraFetcher(config=jira_config)


@pytest.fixture
def make_fetcher(jira_config_factory, mock_atlassian_jira):
    """Build a JiraFetcher with config overrides."""

    def _make(**overrides):
        return JiraFetcher(config=jira_config_factory(**overrides))

    return _make
