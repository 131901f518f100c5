import json
import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

import requests
from fastmcp import Context
from requests.exceptions import HTTPError

from mcp_jira.exceptions import JiraApiError, MCPJiraAuthenticationError

logger = logging.getLogger(__name__)


F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def check_write_access(func: F) -> F:
    """
    Decorator for FastMCP tools that refuses to run in read-only mode.

    Assumes the decorated function is async and has `ctx: Context` as its first argument.
    """

    @wraps(func)
    async def wrapper(ctx: Context, *args: Any, **kwargs: Any) -> Any:
        lifespan_ctx_dict = ctx.request_context.lifespan_context
        app_lifespan_ctx = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )  # type: ignore

        if app_lifespan_ctx is not None and app_lifespan_ctx.read_only:
            tool_name = func.__name__
            action_description = tool_name.replace("_", " ")
            logger.warning(f"Attempted to call tool '{tool_name}' in read-only mode.")
            raise ValueError(f"Cannot {action_description} in read-only mode.")

        return await func(ctx, *args, **kwargs)

    return wrapper  # type: ignore


def extract_jira_error_details(response: requests.Response | None) -> str | None:
    """
    Pull the human-readable error text out of a Jira error response.

    Jira reports failures as ``{"errorMessages": [...], "errors": {field: msg}}``;
    anything else is returned as raw text.

    Args:
        response: The failed HTTP response

    Returns:
        Error details, or None if the response carried none
    """
    if response is None:
        return None
    text = response.text or ""
    try:
        payload = json.loads(text)
    except ValueError:
        return text or None
    if not isinstance(payload, dict):
        return text or None

    messages = [str(m) for m in payload.get("errorMessages") or []]
    field_errors = payload.get("errors") or {}
    if isinstance(field_errors, dict):
        messages.extend(f"{field}: {msg}" for field, msg in field_errors.items())
    if not messages and payload.get("message"):
        messages.append(str(payload["message"]))
    return ", ".join(messages) if messages else (text or None)


def handle_jira_api_errors(service_name: str = "Jira API") -> Callable:
    """
    Decorator mapping transport failures of Jira client methods onto MCP Jira errors.

    - 401/403 become `MCPJiraAuthenticationError`
    - other HTTP errors become `JiraApiError` carrying the status code and Jira's messages
    - network failures become `JiraApiError` with status code 0

    Args:
        service_name: Name of the service for error messages (e.g., "Jira API").
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            operation_name = getattr(func, "__name__", "API operation")
            try:
                return func(self, *args, **kwargs)
            except HTTPError as http_err:
                response = http_err.response
                status_code = response.status_code if response is not None else 0
                if status_code in (401, 403):
                    error_msg = (
                        f"Authentication failed for {service_name} "
                        f"({status_code}). "
                        "Token may be expired or invalid. Please verify credentials."
                    )
                    logger.error(error_msg)
                    raise MCPJiraAuthenticationError(error_msg) from http_err
                details = extract_jira_error_details(response)
                logger.error(
                    f"HTTP error during {operation_name}: {status_code} {details or http_err}"
                )
                raise JiraApiError(
                    f"{service_name} error: {status_code}",
                    status_code=status_code,
                    details=details,
                ) from http_err
            except requests.RequestException as e:
                logger.error(f"Network error during {operation_name}: {str(e)}")
                raise JiraApiError(
                    f"Network error occurred while calling {service_name}",
                    status_code=0,
                    details=str(e),
                ) from e

        return wrapper

    return decorator
