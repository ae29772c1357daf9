"""Contract of the clients that query game servers over the network."""
from __future__ import annotations

from typing import Protocol

from status_api.domain.models.upstream_status import (
    UpstreamBedrockStatus,
    UpstreamJavaStatus,
    UpstreamLegacyStatus,
)


class QueryError(Exception):
    """Signal that a server could not be queried or answered unexpectedly."""


class StatusQueryClient(Protocol):
    """Query a server by host and port, raising ``QueryError`` on failure."""

    def query_java(self, host: str, port: int) -> UpstreamJavaStatus:
        """Run the modern Java Edition status handshake."""

    def query_legacy(self, host: str, port: int) -> UpstreamLegacyStatus:
        """Run the legacy (pre-1.7) Java Edition server list ping."""

    def query_bedrock(self, host: str, port: int) -> UpstreamBedrockStatus:
        """Run the Bedrock Edition unconnected ping."""
