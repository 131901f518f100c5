"""MCP Jira server package."""

import logging
from typing import Literal

from .main import main_mcp

logger = logging.getLogger("mcp-jira.server")

Transport = Literal["stdio", "sse", "streamable-http"]


def run_server(
    transport: Transport = "stdio", port: int = 8000, host: str = "0.0.0.0"
) -> None:
    """Run the Jira MCP server on the given transport.

    Args:
        transport: ``stdio``, ``sse`` or ``streamable-http``
        port: Port for the HTTP transports
        host: Bind address for the HTTP transports
    """
    if transport == "stdio":
        logger.info("Starting server with STDIO transport.")
        main_mcp.run(transport="stdio")
        return

    logger.info(f"Starting server with {transport.upper()} transport on {host}:{port}")
    main_mcp.run(transport=transport, host=host, port=port)


__all__ = ["main_mcp", "run_server"]
