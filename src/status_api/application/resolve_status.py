"""Use cases resolving server statuses through the cache-aside store."""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from status_api.domain.models.server_status import ServerStatus
from status_api.domain.repositories.address_policy import AddressPolicy
from status_api.domain.repositories.cache_store import CacheStore
from status_api.domain.repositories.status_query_client import (
    QueryError,
    StatusQueryClient,
)
from status_api.domain.services.status_normalizer import (
    build_bedrock_status,
    build_java_status,
    build_legacy_java_status,
    build_offline_status,
)

logger = logging.getLogger(__name__)

JAVA_CACHE_NAMESPACE = "primary"
BEDROCK_CACHE_NAMESPACE = "second"


def build_cache_key(namespace: str, host: str, port: int) -> str:
    """Return the cache key of ``host``/``port`` within ``namespace``."""

    return f"{namespace}:{host}-{port}"


@dataclass(frozen=True)
class StatusResolution:
    """Serialized status and, when served from cache, its remaining TTL."""

    payload: str
    ttl: Optional[timedelta] = None

    @property
    def cache_hit(self) -> bool:
        """Return ``True`` when the payload came from the cache."""

        return self.ttl is not None


def serialize_status(status: ServerStatus) -> str:
    """Encode ``status`` as the JSON document returned to clients."""

    return json.dumps(status.to_dict(), ensure_ascii=False, allow_nan=False)


class _CachedStatusUseCase(ABC):
    """Shared cache-aside flow; subclasses provide the uncached lookup."""

    namespace: str

    def __init__(
        self,
        cache: CacheStore,
        query_client: StatusQueryClient,
        address_policy: AddressPolicy,
        cache_ttl: timedelta,
    ) -> None:
        """Initialize the use case with its collaborators."""

        self._cache = cache
        self._query_client = query_client
        self._address_policy = address_policy
        self._cache_ttl = cache_ttl

    def execute(self, host: str, port: int) -> StatusResolution:
        """Return the cached status for ``host``/``port`` or query it afresh."""

        cache_key = build_cache_key(self.namespace, host, port)
        cached = self._cache.get_string(cache_key)
        if cached is not None:
            logger.debug("Cache hit for %s (%s remaining)", cache_key, cached.ttl)
            return StatusResolution(payload=cached.value, ttl=cached.ttl)

        logger.debug("Cache miss for %s", cache_key)
        payload = serialize_status(self._fetch(host, port))
        self._cache.set(cache_key, payload, self._cache_ttl)
        return StatusResolution(payload=payload)

    @abstractmethod
    def _fetch(self, host: str, port: int) -> ServerStatus:
        """Return the freshly queried status of ``host``/``port``."""


class ResolveJavaStatusUseCase(_CachedStatusUseCase):
    """Resolve Java Edition statuses, falling back to the legacy ping."""

    namespace = JAVA_CACHE_NAMESPACE

    def _fetch(self, host: str, port: int) -> ServerStatus:
        """Query the server, degrading to the legacy ping and then to offline."""

        eula_blocked = self._address_policy.is_blocked(host)

        try:
            upstream = self._query_client.query_java(host, port)
        except QueryError as error:
            logger.info("Status query of %s:%s failed, trying legacy ping: %s", host, port, error)
        else:
            return build_java_status(host, port, eula_blocked, upstream)

        try:
            legacy = self._query_client.query_legacy(host, port)
        except QueryError as error:
            logger.info("Legacy ping of %s:%s failed, reporting offline: %s", host, port, error)
            return build_offline_status(host, port, eula_blocked)

        return build_legacy_java_status(host, port, eula_blocked, legacy)


class ResolveBedrockStatusUseCase(_CachedStatusUseCase):
    """Resolve Bedrock Edition statuses; there is no fallback protocol."""

    namespace = BEDROCK_CACHE_NAMESPACE

    def _fetch(self, host: str, port: int) -> ServerStatus:
        """Query the server once, reporting it offline when it does not answer."""

        eula_blocked = self._address_policy.is_blocked(host)

        try:
            upstream = self._query_client.query_bedrock(host, port)
        except QueryError as error:
            logger.info("Bedrock query of %s:%s failed, reporting offline: %s", host, port, error)
            return build_offline_status(host, port, eula_blocked)

        return build_bedrock_status(host, port, eula_blocked, upstream)
