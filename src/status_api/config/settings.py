"""Application configuration helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import timedelta
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class Settings:
    """Holds configuration values for the application."""

    java_cache_ttl_seconds: int = 60
    bedrock_cache_ttl_seconds: int = 60
    icon_cache_ttl_seconds: int = 900
    query_timeout_seconds: float = 5.0
    cache_max_entries: int = 10_000
    blocked_servers_path: Optional[Path] = None
    log_level: str = "INFO"
    app_version: str = "0.1.0"
    api_version: str = "v1"
    allowed_origins: Tuple[str, ...] = ("*",)

    @property
    def java_cache_ttl(self) -> timedelta:
        """Return how long Java Edition statuses stay cached."""

        return timedelta(seconds=self.java_cache_ttl_seconds)

    @property
    def bedrock_cache_ttl(self) -> timedelta:
        """Return how long Bedrock Edition statuses stay cached."""

        return timedelta(seconds=self.bedrock_cache_ttl_seconds)

    @property
    def icon_cache_ttl(self) -> timedelta:
        """Return how long server icons stay cached."""

        return timedelta(seconds=self.icon_cache_ttl_seconds)

    @property
    def api_prefix(self) -> str:
        """Return the URL prefix used for versioned API routes."""

        return f"/api/{self.api_version}"


def get_settings() -> Settings:
    """Provide application settings, applying environment variable overrides."""

    settings = Settings()
    overrides: dict[str, object] = {}

    for field_name, env_name in (
        ("java_cache_ttl_seconds", "JAVA_CACHE_TTL_SECONDS"),
        ("bedrock_cache_ttl_seconds", "BEDROCK_CACHE_TTL_SECONDS"),
        ("icon_cache_ttl_seconds", "ICON_CACHE_TTL_SECONDS"),
        ("cache_max_entries", "CACHE_MAX_ENTRIES"),
    ):
        raw_value = os.getenv(env_name)
        if raw_value:
            overrides[field_name] = _parse_positive_int(env_name, raw_value)

    raw_timeout = os.getenv("QUERY_TIMEOUT_SECONDS")
    if raw_timeout:
        overrides["query_timeout_seconds"] = _parse_positive_float(
            "QUERY_TIMEOUT_SECONDS", raw_timeout
        )

    blocked_servers_path = os.getenv("BLOCKED_SERVERS_PATH")
    if blocked_servers_path:
        overrides["blocked_servers_path"] = Path(blocked_servers_path).expanduser()

    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level.strip().upper()

    return replace(settings, **overrides) if overrides else settings


def _parse_positive_int(env_name: str, raw_value: str) -> int:
    try:
        value = int(raw_value)
    except ValueError as error:
        raise ValueError(f"{env_name} must be an integer, got {raw_value!r}.") from error
    if value <= 0:
        raise ValueError(f"{env_name} must be positive, got {value}.")
    return value


def _parse_positive_float(env_name: str, raw_value: str) -> float:
    try:
        value = float(raw_value)
    except ValueError as error:
        raise ValueError(f"{env_name} must be a number, got {raw_value!r}.") from error
    if value <= 0:
        raise ValueError(f"{env_name} must be positive, got {value}.")
    return value
