"""Project registry lookup: maps a tenant API key to its Jira credentials."""

import logging
import os
import threading
from dataclasses import dataclass

import requests
from cachetools import TTLCache

from .exceptions import TenantResolutionError
from .jira.config import JiraConfig
from .logging_config import log_operation
from .utils import get_env_number, mask_sensitive, normalize_base_url

logger = logging.getLogger("mcp-jira.registry")

DEFAULT_REGISTRY_TIMEOUT = 10
DEFAULT_REGISTRY_CACHE_TTL = 300
REGISTRY_CACHE_SIZE = 256


@dataclass(frozen=True)
class TenantCredentials:
    """Jira site and account a tenant has configured in the registry."""

    url: str
    email: str
    api_token: str

    def to_jira_config(self) -> JiraConfig:
        """Build a basic-auth Jira configuration for this tenant."""
        return JiraConfig.from_credentials(
            url=self.url, username=self.email, api_token=self.api_token
        )


@dataclass
class RegistryConfig:
    """Project registry configuration."""

    url: str
    timeout: float = DEFAULT_REGISTRY_TIMEOUT
    cache_ttl: float = DEFAULT_REGISTRY_CACHE_TTL  # 0 disables caching

    def __post_init__(self) -> None:
        self.url = normalize_base_url(self.url)

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Create configuration from environment variables.

        Raises:
            ValueError: If PROJECT_REGISTRY_URL is not set
        """
        url = os.getenv("PROJECT_REGISTRY_URL")
        if not url:
            raise ValueError("Missing required PROJECT_REGISTRY_URL environment variable")
        return cls(
            url=url,
            timeout=get_env_number("PROJECT_REGISTRY_TIMEOUT", DEFAULT_REGISTRY_TIMEOUT),
            cache_ttl=get_env_number(
                "PROJECT_REGISTRY_CACHE_TTL", DEFAULT_REGISTRY_CACHE_TTL
            ),
        )

    @staticmethod
    def is_configured() -> bool:
        return bool(os.getenv("PROJECT_REGISTRY_URL"))


class TenantRegistry:
    """
    Client for the project registry service.

    ``GET {registry}/api/project?apiKey=<key>`` returns the project record,
    whose ``configs.jira`` block holds the tenant's Jira site URL, account
    email and API token. Successful lookups are cached per key.
    """

    def __init__(self, config: RegistryConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._cache: TTLCache[str, TenantCredentials] | None = (
            TTLCache(maxsize=REGISTRY_CACHE_SIZE, ttl=config.cache_ttl)
            if config.cache_ttl > 0
            else None
        )

    def get_credentials(self, api_key: str) -> TenantCredentials:
        """
        Resolve a tenant API key to Jira credentials.

        Args:
            api_key: The key sent by the client in ``X-API-Key``

        Returns:
            The tenant's Jira credentials

        Raises:
            TenantResolutionError: If the key is empty or unknown, the
                registry cannot be reached, or the project has no Jira config
        """
        if not api_key:
            raise TenantResolutionError("API key is required")

        if self._cache is not None:
            with self._lock:
                cached = self._cache.get(api_key)
            if cached is not None:
                logger.debug(f"Registry cache hit for key {mask_sensitive(api_key)}")
                return cached

        with log_operation(logger, "resolve_tenant", tenant=mask_sensitive(api_key)):
            credentials = self._fetch(api_key)

        if self._cache is not None:
            with self._lock:
                self._cache[api_key] = credentials
        return credentials

    def clear_cache(self) -> None:
        if self._cache is not None:
            with self._lock:
                self._cache.clear()

    def _fetch(self, api_key: str) -> TenantCredentials:
        url = f"{self.config.url}/api/project"
        try:
            response = requests.get(
                url, params={"apiKey": api_key}, timeout=self.config.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Project registry request failed: {e}")
            raise TenantResolutionError(f"Project registry unreachable: {e}") from e

        if not response.ok:
            logger.warning(
                f"Project registry rejected key {mask_sensitive(api_key)} "
                f"with status {response.status_code}"
            )
            raise TenantResolutionError("Invalid API key or project not found")

        try:
            payload = response.json()
        except ValueError as e:
            raise TenantResolutionError("Project registry returned invalid JSON") from e

        project = payload.get("project") if isinstance(payload, dict) else None
        configs = project.get("configs") if isinstance(project, dict) else None
        jira = configs.get("jira") if isinstance(configs, dict) else None
        if not isinstance(jira, dict):
            raise TenantResolutionError("JIRA not configured for this project")

        base_url = jira.get("baseUrl")
        email = jira.get("email")
        api_token = jira.get("apiToken")
        if not (base_url and email and api_token):
            raise TenantResolutionError("JIRA not configured for this project")

        logger.info(f"Resolved tenant {mask_sensitive(api_key)} to {base_url}")
        return TenantCredentials(
            url=normalize_base_url(base_url), email=email, api_token=api_token
        )
