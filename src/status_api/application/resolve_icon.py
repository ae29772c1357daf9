"""Use case resolving the icon advertised by Java Edition servers."""
from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from status_api.application.resolve_status import build_cache_key
from status_api.domain.repositories.cache_store import CacheStore
from status_api.domain.repositories.status_query_client import (
    QueryError,
    StatusQueryClient,
)

logger = logging.getLogger(__name__)

ICON_CACHE_NAMESPACE = "icon"
PNG_DATA_URI_PREFIX = "data:image/png;base64,"


class IconDecodeError(ValueError):
    """Signal that the server advertised a PNG icon with an invalid payload."""


@dataclass(frozen=True)
class IconResolution:
    """PNG bytes and, when served from cache, their remaining TTL."""

    data: bytes
    ttl: Optional[timedelta] = None

    @property
    def cache_hit(self) -> bool:
        """Return ``True`` when the icon came from the cache."""

        return self.ttl is not None


class ResolveServerIconUseCase:
    """Return a server's icon, or the placeholder when it advertises none."""

    def __init__(
        self,
        cache: CacheStore,
        query_client: StatusQueryClient,
        default_icon: bytes,
        cache_ttl: timedelta,
    ) -> None:
        """Initialize the use case with its collaborators and placeholder icon."""

        self._cache = cache
        self._query_client = query_client
        self._default_icon = default_icon
        self._cache_ttl = cache_ttl

    def execute(self, host: str, port: int) -> IconResolution:
        """Return the cached icon for ``host``/``port`` or fetch it afresh.

        Only the modern status query carries an icon, so there is no legacy
        fallback. A favicon without the PNG data URI prefix keeps the
        placeholder, while a malformed base64 payload raises
        :class:`IconDecodeError`.
        """

        cache_key = build_cache_key(ICON_CACHE_NAMESPACE, host, port)
        cached = self._cache.get_bytes(cache_key)
        if cached is not None:
            logger.debug("Cache hit for %s (%s remaining)", cache_key, cached.ttl)
            return IconResolution(data=cached.value, ttl=cached.ttl)

        icon = self._default_icon
        try:
            status = self._query_client.query_java(host, port)
        except QueryError as error:
            logger.info("Icon query of %s:%s failed, using placeholder: %s", host, port, error)
        else:
            favicon = status.favicon
            if favicon is not None and favicon.startswith(PNG_DATA_URI_PREFIX):
                icon = _decode_png(favicon[len(PNG_DATA_URI_PREFIX) :])

        self._cache.set(cache_key, icon, self._cache_ttl)
        return IconResolution(data=icon)


def _decode_png(encoded: str) -> bytes:
    """Decode the standard base64 payload of a PNG data URI.

    Line breaks are ignored so MIME-wrapped payloads decode; any other
    character outside the standard alphabet is an error.
    """

    unwrapped = encoded.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(unwrapped, validate=True)
    except (binascii.Error, ValueError) as error:
        raise IconDecodeError("The server advertised an invalid icon payload.") from error
