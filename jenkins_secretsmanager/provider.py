"""
Credentials Provider

Serves credentials to the host, memoizing the supplier's result for a
short time unless caching is disabled in the plugin configuration.
"""

import threading
import time
from typing import Callable, List, Optional, Type

from .config import PluginConfiguration
from .credentials import StandardCredentials
from .loggingx import get_logger
from .supplier import CredentialsSupplier

logger = get_logger(__name__)

CACHE_DURATION_SECONDS = 5 * 60


class CredentialsProvider:
    """Entry point for the host's credential lookups."""

    def __init__(self, supplier: Optional[CredentialsSupplier] = None,
                 cache_duration: float = CACHE_DURATION_SECONDS,
                 configuration_source: Optional[Callable[[], PluginConfiguration]] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.supplier = supplier or CredentialsSupplier.standard()
        self.cache_duration = cache_duration
        self.configuration_source = configuration_source or PluginConfiguration.get_instance
        self.clock = clock

        self._lock = threading.Lock()
        self._cached: Optional[List[StandardCredentials]] = None
        self._expires_at = 0.0

    def _cache_enabled(self) -> bool:
        return self.configuration_source().cache

    def _fetch(self) -> List[StandardCredentials]:
        if not self._cache_enabled():
            self.invalidate()
            return self.supplier.get()

        with self._lock:
            now = self.clock()
            if self._cached is None or now >= self._expires_at:
                logger.debug("Refreshing credentials cache")
                self._cached = self.supplier.get()
                self._expires_at = now + self.cache_duration
            return list(self._cached)

    def get_credentials(self, credential_type: Optional[Type[StandardCredentials]] = None) -> List[StandardCredentials]:
        """
        Get all credentials, optionally only those of one type.

        Args:
            credential_type: Credential class to filter by (subclasses match)

        Returns:
            List of credentials
        """
        credentials = self._fetch()
        if credential_type is None:
            return credentials
        return [c for c in credentials if isinstance(c, credential_type)]

    def get_credential(self, credential_id: str) -> Optional[StandardCredentials]:
        """Get a credential by id, or None if there is none."""
        for credential in self._fetch():
            if credential.id == credential_id:
                return credential
        return None

    def list_ids(self) -> List[str]:
        return [c.id for c in self._fetch()]

    def invalidate(self) -> None:
        """Drop the cached credentials so the next lookup re-fetches."""
        with self._lock:
            self._cached = None
            self._expires_at = 0.0
