"""
Registry Loader

Produces a validated Registry from whichever source is authoritative:
1. Local .registry/registry.yml (development mode)
2. Remote registry URL (production mode)

The result is kept in a RegistryCache. A failed load never touches the cache,
so calling load again retries the I/O.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import httpx
import yaml

from slashctl.config import ConfigManager
from slashctl.errors import (
    AsyncRequiredError,
    RegistryFetchError,
    RegistryParseError,
    RegistrySourceNotFoundError,
    RegistryValidationError,
)
from slashctl.registry.cache import RegistryCache
from slashctl.registry.locator import RegistryLocator
from slashctl.registry.models import Registry
from slashctl.registry.validation import validate_registry

logger = logging.getLogger(__name__)


class RegistryLoader:
    """
    Loads the registry with caching.

    load() is for callers that cannot await: it only reads a local registry
    and raises AsyncRequiredError in production mode. load_async() handles
    both modes.
    """

    _instance: Optional["RegistryLoader"] = None

    def __init__(
        self,
        locator: RegistryLocator | None = None,
        cache: RegistryCache | None = None,
        registry_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize registry loader.

        Args:
            locator: Local registry locator (default: working directory + install root)
            cache: Cache slot to populate (default: a fresh, empty cache)
            registry_url: Override remote registry URL
            user_agent: User-Agent header sent with the remote fetch
            timeout: HTTP timeout in seconds
        """
        config = ConfigManager.get_instance().get()
        self.locator = locator if locator is not None else RegistryLocator()
        self.cache = cache if cache is not None else RegistryCache()
        self.registry_url = registry_url or config.registry_url
        self.user_agent = user_agent or config.user_agent
        self.timeout = timeout if timeout is not None else config.http_timeout

    @classmethod
    def get_instance(cls) -> "RegistryLoader":
        """Get the process-wide loader used by the module-level helpers."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    # =========================================================================
    # Public API
    # =========================================================================

    def load(self) -> Registry:
        """
        Load the registry without awaiting.

        Raises:
            AsyncRequiredError: no local registry is available
            RegistrySourceNotFoundError: the local registry vanished before reading
            RegistryParseError: the local registry could not be read or parsed
            RegistryValidationError: the document is not a valid registry
        """
        cached = self.cache.get()
        if cached is not None:
            logger.debug("Registry served from cache")
            return cached

        if not self.locator.is_local_mode_available():
            raise AsyncRequiredError()

        path = self.locator.resolve_path()
        if not path.exists():
            raise RegistrySourceNotFoundError(str(path))

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RegistryParseError(str(path), e) from e

        registry = self._parse_local(content, path)
        self.cache.set(registry)
        return registry

    async def load_async(self) -> Registry:
        """
        Load the registry from the local file or the remote URL.

        Raises:
            RegistrySourceNotFoundError: the local registry vanished before reading
            RegistryParseError: the local registry could not be read or parsed
            RegistryFetchError: the remote registry could not be fetched or parsed
            RegistryValidationError: the document is not a valid registry
        """
        cached = self.cache.get()
        if cached is not None:
            logger.debug("Registry served from cache")
            return cached

        if self.locator.is_local_mode_available():
            registry = await self._load_local_async()
        else:
            registry = await self._fetch_remote()

        self.cache.set(registry)
        return registry

    def clear_cache(self) -> None:
        """Forget the cached registry."""
        self.cache.clear()

    def is_local_mode_available(self) -> bool:
        return self.locator.is_local_mode_available()

    def source_description(self) -> str:
        """Human-readable description of where the next load would read from."""
        if self.locator.is_local_mode_available():
            return f"local registry {self.locator.resolve_path()}"
        return f"remote registry {self.registry_url}"

    # =========================================================================
    # Sources
    # =========================================================================

    async def _load_local_async(self) -> Registry:
        path = self.locator.resolve_path()
        if not path.exists():
            raise RegistrySourceNotFoundError(str(path))

        logger.debug(f"Loading registry from {path}")
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RegistryParseError(str(path), e) from e

        return self._parse_local(content, path)

    async def _fetch_remote(self) -> Registry:
        url = self.registry_url
        logger.debug(f"Fetching registry from {url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers={"User-Agent": self.user_agent})
        except httpx.RequestError as e:
            raise RegistryFetchError(url, cause=e) from e

        if not 200 <= response.status_code < 300:
            raise RegistryFetchError(url, response.status_code, response.reason_phrase)

        try:
            data = yaml.safe_load(response.text)
            return validate_registry(data, url)
        except (RegistryValidationError, RegistryFetchError):
            raise
        except Exception as e:
            raise RegistryFetchError(url, cause=e) from e

    def _parse_local(self, content: str, path: Path) -> Registry:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise RegistryParseError(str(path), e) from e

        try:
            return validate_registry(data, str(path))
        except RegistryValidationError:
            raise
        except Exception as e:
            raise RegistryParseError(str(path), e) from e


# =============================================================================
# Module-level helpers backed by the process-wide loader
# =============================================================================

def get_default_loader() -> RegistryLoader:
    return RegistryLoader.get_instance()


def load_registry() -> Registry:
    """Load the registry synchronously (development mode only)."""
    return get_default_loader().load()


async def load_registry_async() -> Registry:
    """Load the registry from the local file or the remote URL."""
    return await get_default_loader().load_async()


def clear_registry_cache() -> None:
    get_default_loader().clear_cache()


def get_registry_path() -> Path:
    return get_default_loader().locator.resolve_path()


def is_local_mode_available() -> bool:
    return get_default_loader().is_local_mode_available()
