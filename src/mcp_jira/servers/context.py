from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira.jira.config import JiraConfig
    from mcp_jira.registry import TenantRegistry


@dataclass(frozen=True)
class MainAppContext:
    """Context holding the global config, tenant registry and server settings (no fetchers)."""

    jira_base_config: JiraConfig | None = None
    registry: TenantRegistry | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
