"""Dependency provider for JiraFetcher with context awareness.

Provides get_jira_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context
from fastmcp.server.dependencies import get_http_request
from starlette.requests import Request

from mcp_jira.jira import JiraFetcher
from mcp_jira.logging_config import log_operation
from mcp_jira.servers.context import MainAppContext
from mcp_jira.utils import mask_sensitive

logger = logging.getLogger("mcp-jira.server.dependencies")


def _get_app_context(ctx: Context) -> MainAppContext | None:
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    if isinstance(lifespan_ctx_dict, dict):
        return lifespan_ctx_dict.get("app_lifespan_context")
    return None


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns a JiraFetcher instance appropriate for the current request context.

    Resolution order:
    1. A fetcher already cached on ``request.state`` for this HTTP request.
    2. The tenant API key captured by ``TenantKeyMiddleware``, resolved
       through the project registry; the fetcher is cached on the request.
    3. The global configuration loaded from the environment (stdio, or HTTP
       requests that carry no key).

    Raises:
        ValueError: If no Jira configuration can be resolved
        TenantResolutionError: If the tenant key cannot be resolved
    """
    app_ctx = _get_app_context(ctx)
    try:
        request: Request = get_http_request()
        if getattr(request.state, "jira_fetcher", None):
            logger.debug("get_jira_fetcher: Returning JiraFetcher from request.state.")
            return request.state.jira_fetcher

        api_key = getattr(request.state, "tenant_api_key", None)
        if api_key:
            if app_ctx is None or app_ctx.registry is None:
                raise ValueError(
                    "X-API-Key was provided but no project registry is configured "
                    "(set PROJECT_REGISTRY_URL)."
                )
            with log_operation(
                logger, "create_tenant_fetcher", tenant=mask_sensitive(api_key)
            ):
                credentials = app_ctx.registry.get_credentials(api_key)
                fetcher = JiraFetcher(config=credentials.to_jira_config())
            request.state.jira_fetcher = fetcher
            return fetcher

        logger.debug(
            "get_jira_fetcher: No tenant key on the request. Will use global fallback."
        )
    except RuntimeError:
        logger.debug(
            "Not in an HTTP request context. Attempting global JiraFetcher for non-HTTP."
        )

    if app_ctx is not None and app_ctx.jira_base_config is not None:
        logger.debug(
            "get_jira_fetcher: Using global JiraFetcher from lifespan_context. "
            f"Global config auth_type: {app_ctx.jira_base_config.auth_type}"
        )
        return JiraFetcher(config=app_ctx.jira_base_config)

    logger.error("Jira configuration could not be resolved.")
    raise ValueError(
        "Jira client (fetcher) not available. Send an X-API-Key header or "
        "configure JIRA_URL and credentials."
    )
