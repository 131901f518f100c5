"""Tests for the URL utilities module."""

import pytest

from mcp_jira.utils.urls import (
    is_atlassian_cloud_url,
    issue_browse_url,
    normalize_base_url,
)


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.atlassian.net", True),
        ("https://example.jira.com/", True),
        ("https://api.atlassian.com/ex/jira/123", True),
        ("https://agency.atlassian-us-gov-mod.net", True),
        ("https://jira.example.com", False),
        ("http://localhost:8080", False),
        ("http://192.168.1.10", False),
        ("http://127.0.0.1.atlassian.net", False),
        ("", False),
        (None, False),
    ],
)
def test_is_atlassian_cloud_url(url, expected):
    assert is_atlassian_cloud_url(url) is expected


def test_normalize_base_url():
    assert normalize_base_url("  https://x.atlassian.net//  ") == "https://x.atlassian.net"


def test_issue_browse_url():
    assert (
        issue_browse_url("https://x.atlassian.net/", "PROJ-1")
        == "https://x.atlassian.net/browse/PROJ-1"
    )
