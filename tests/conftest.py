"""Shared fixtures for the MCP Jira test suite."""

import os

import pytest

_ISOLATED_ENV_PREFIXES = ("JIRA_", "PROJECT_REGISTRY_")
_ISOLATED_ENV_VARS = ("READ_ONLY_MODE", "ENABLED_TOOLS", "TRANSPORT", "PORT", "HOST")


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep a developer's Jira or registry settings out of the tests."""
    for name in list(os.environ):
        if name.startswith(_ISOLATED_ENV_PREFIXES) or name in _ISOLATED_ENV_VARS:
            monkeypatch.delenv(name, raising=False)
