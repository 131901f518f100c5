"""Tool filtering utilities for MCP Jira."""

import os


def get_enabled_tools() -> list[str] | None:
    """Get the list of enabled tools from the ENABLED_TOOLS environment variable.

    Returns:
        Tool names from the comma-separated variable, or None if all tools are enabled
    """
    enabled_tools_str = os.getenv("ENABLED_TOOLS")
    if not enabled_tools_str:
        return None
    tools = [tool.strip() for tool in enabled_tools_str.split(",") if tool.strip()]
    return tools or None


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check if a tool should be exposed.

    Args:
        tool_name: Registered tool name (e.g. ``jira_add_comment``)
        enabled_tools: Allowed names, or None for all tools

    Returns:
        True if the tool is enabled
    """
    if enabled_tools is None:
        return True
    return tool_name in enabled_tools
