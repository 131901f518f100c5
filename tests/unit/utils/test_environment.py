"""Tests for the environment and tool filtering helpers."""

import pytest

from mcp_jira.utils import (
    get_enabled_tools,
    get_env_number,
    is_env_extended_truthy,
    is_env_ssl_verify,
    is_env_truthy,
    is_read_only_mode,
    mask_sensitive,
    should_include_tool,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("1", True), ("YES", True), ("on", False), ("false", False)],
)
def test_is_env_truthy(monkeypatch, value, expected):
    monkeypatch.setenv("TEST_FLAG", value)
    assert is_env_truthy("TEST_FLAG") is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("y", True), ("on", True), ("True", True), ("off", False), ("", False)],
)
def test_is_env_extended_truthy(monkeypatch, value, expected):
    monkeypatch.setenv("TEST_FLAG", value)
    assert is_env_extended_truthy("TEST_FLAG") is expected


def test_is_env_ssl_verify_defaults_to_true(monkeypatch):
    monkeypatch.delenv("TEST_SSL", raising=False)
    assert is_env_ssl_verify("TEST_SSL") is True
    monkeypatch.setenv("TEST_SSL", "false")
    assert is_env_ssl_verify("TEST_SSL") is False


@pytest.mark.parametrize(
    ("value", "expected"), [(None, 5), ("", 5), ("  ", 5), ("12", 12), ("1.5", 1.5), ("x", 5)]
)
def test_get_env_number(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv("TEST_NUMBER", raising=False)
    else:
        monkeypatch.setenv("TEST_NUMBER", value)
    assert get_env_number("TEST_NUMBER", 5) == expected


def test_is_read_only_mode(monkeypatch):
    assert is_read_only_mode() is False
    monkeypatch.setenv("READ_ONLY_MODE", "on")
    assert is_read_only_mode() is True


def test_get_enabled_tools(monkeypatch):
    assert get_enabled_tools() is None
    monkeypatch.setenv("ENABLED_TOOLS", " jira_get_issue , ,jira_search ")
    assert get_enabled_tools() == ["jira_get_issue", "jira_search"]
    monkeypatch.setenv("ENABLED_TOOLS", " , ")
    assert get_enabled_tools() is None


def test_should_include_tool():
    assert should_include_tool("jira_get_issue", None) is True
    assert should_include_tool("jira_get_issue", ["jira_get_issue"]) is True
    assert should_include_tool("jira_add_comment", ["jira_get_issue"]) is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "None"),
        ("", "None"),
        ("short", "*****"),
        ("abcdefghijkl", "********ijkl"),
    ],
)
def test_mask_sensitive(value, expected):
    assert mask_sensitive(value) == expected
