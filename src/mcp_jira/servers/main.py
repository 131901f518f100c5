"""Main FastMCP server setup for the multi-tenant Jira integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Literal, Optional

import fastmcp
from fastmcp import FastMCP
from fastmcp.tools import Tool as FastMCPTool
from mcp.types import Tool as MCPTool
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from mcp_jira.jira.config import JiraConfig
from mcp_jira.registry import RegistryConfig, TenantRegistry
from mcp_jira.utils import (
    get_enabled_tools,
    is_read_only_mode,
    mask_sensitive,
    should_include_tool,
)

from .context import MainAppContext
from .jira import jira_mcp

logger = logging.getLogger("mcp-jira.server.main")

API_KEY_HEADER = "X-API-Key"


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Jira MCP server lifespan starting...")
    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()

    loaded_jira_config: JiraConfig | None = None
    registry: TenantRegistry | None = None

    if JiraConfig.is_configured():
        try:
            loaded_jira_config = JiraConfig.from_env()
            logger.info(
                f"Global Jira configuration loaded for {loaded_jira_config.url}"
            )
        except ValueError as e:
            logger.error(f"Failed to load Jira configuration: {e}")
    else:
        logger.info("No global Jira credentials; tenants must send an API key.")

    if RegistryConfig.is_configured():
        registry_config = RegistryConfig.from_env()
        registry = TenantRegistry(registry_config)
        logger.info(
            f"Project registry at {registry_config.url} "
            f"(cache ttl {registry_config.cache_ttl:g}s)"
        )

    if loaded_jira_config is None and registry is None:
        logger.warning(
            "Neither JIRA_URL credentials nor PROJECT_REGISTRY_URL are configured; "
            "Jira tools will fail until one is provided."
        )

    app_context = MainAppContext(
        jira_base_config=loaded_jira_config,
        registry=registry,
        read_only=read_only,
        enabled_tools=enabled_tools,
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")

    try:
        yield {"app_lifespan_context": app_context}
    finally:
        if registry is not None:
            registry.clear_cache()
        logger.info("Main Jira MCP server lifespan shutdown complete.")


class JiraMCP(FastMCP[MainAppContext]):
    """Custom FastMCP server class for Jira with tool filtering."""

    async def _mcp_list_tools(self) -> list[MCPTool]:
        # Filter tools based on enabled_tools and read_only mode from the lifespan context.
        req_context = self._mcp_server.request_context
        if req_context is None or req_context.lifespan_context is None:
            logger.warning("Lifespan context not available during _mcp_list_tools call.")
            return []

        lifespan_ctx_dict = req_context.lifespan_context
        app_lifespan_state: MainAppContext | None = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )
        read_only = app_lifespan_state.read_only if app_lifespan_state else False
        enabled_tools_filter = (
            app_lifespan_state.enabled_tools if app_lifespan_state else None
        )

        all_tools: dict[str, FastMCPTool] = await self.get_tools()
        logger.debug(
            f"Aggregated {len(all_tools)} tools before filtering: {list(all_tools.keys())}"
        )

        filtered_tools: list[MCPTool] = []
        for registered_name, tool_obj in all_tools.items():
            if not should_include_tool(registered_name, enabled_tools_filter):
                logger.debug(f"Excluding tool '{registered_name}' (not enabled)")
                continue

            if read_only and "write" in tool_obj.tags:
                logger.debug(
                    f"Excluding tool '{registered_name}' due to read-only mode and 'write' tag"
                )
                continue

            filtered_tools.append(tool_obj.to_mcp_tool(name=registered_name))

        logger.debug(f"Tool listing: {len(filtered_tools)} tools after filtering")
        return filtered_tools

    def http_app(
        self,
        path: str | None = None,
        middleware: list[Middleware] | None = None,
        transport: Literal["streamable-http", "sse"] = "streamable-http",
        **kwargs: Any,
    ) -> "Starlette":
        tenant_key_mw = Middleware(TenantKeyMiddleware, mcp_server_ref=self)
        final_middleware_list = [tenant_key_mw]
        if middleware:
            final_middleware_list.extend(middleware)
        return super().http_app(
            path=path, middleware=final_middleware_list, transport=transport, **kwargs
        )


class TenantKeyMiddleware(BaseHTTPMiddleware):
    """Middleware that captures the tenant API key from the ``X-API-Key`` header."""

    def __init__(self, app: Any, mcp_server_ref: Optional["JiraMCP"] = None) -> None:
        super().__init__(app)
        self.mcp_server_ref = mcp_server_ref

    @staticmethod
    def _mcp_paths() -> set[str]:
        return {
            fastmcp.settings.streamable_http_path.rstrip("/"),
            fastmcp.settings.message_path.rstrip("/"),
        }

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_path = request.url.path.rstrip("/")
        if request.method == "POST" and request_path in self._mcp_paths():
            api_key = request.headers.get(API_KEY_HEADER)
            if api_key is not None:
                api_key = api_key.strip()
                if not api_key:
                    logger.warning(f"Empty {API_KEY_HEADER} header on {request.url.path}")
                    return JSONResponse(
                        {"error": f"Unauthorized: Empty {API_KEY_HEADER} header"},
                        status_code=401,
                    )
                request.state.tenant_api_key = api_key
                logger.debug(
                    f"TenantKeyMiddleware: tenant key (masked) {mask_sensitive(api_key)}"
                )
            else:
                logger.debug(
                    f"No {API_KEY_HEADER} header for {request.url.path}. "
                    "Will use the global configuration if available."
                )
        return await call_next(request)


main_mcp = JiraMCP(name="Jira MCP", lifespan=main_lifespan)
main_mcp.mount(jira_mcp, prefix="jira")


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)
