"""Query client backed by the ``mcstatus`` protocol library."""
from __future__ import annotations

from typing import Any, List, Optional

from status_api.domain.models.upstream_status import (
    FormattedText,
    UpstreamBedrockStatus,
    UpstreamJavaPlayers,
    UpstreamJavaStatus,
    UpstreamJavaVersion,
    UpstreamLegacyStatus,
    UpstreamMod,
    UpstreamPlayer,
)
from status_api.domain.repositories.status_query_client import QueryError

_UNKNOWN_PROTOCOL = -1


class McstatusQueryClient:
    """Run the Java, legacy and Bedrock status queries through ``mcstatus``.

    ``mcstatus`` is imported when a query runs, so building the application
    with stub clients never loads the protocol library.
    """

    def __init__(self, timeout: float = 5.0) -> None:
        """Initialize the client with the per-query network timeout in seconds."""

        self._timeout = timeout

    def query_java(self, host: str, port: int) -> UpstreamJavaStatus:
        """Return the modern Java Edition status of ``host``/``port``."""

        from mcstatus import JavaServer

        try:
            status = JavaServer(host, port, timeout=self._timeout).status()
        except Exception as error:
            raise QueryError(f"Java status query of {host}:{port} failed: {error}") from error

        sample: Optional[List[UpstreamPlayer]] = None
        if status.players.sample is not None:
            sample = [
                UpstreamPlayer(id=player.id, name=_format_text(player.name))
                for player in status.players.sample
            ]

        return UpstreamJavaStatus(
            version=UpstreamJavaVersion(
                name=_format_text(status.version.name),
                protocol=status.version.protocol,
            ),
            players=UpstreamJavaPlayers(
                online=status.players.online,
                max=status.players.max,
                sample=sample,
            ),
            motd=_render_motd(status.motd),
            favicon=status.icon,
            mods=_forge_mods(getattr(status, "forge_data", None)),
        )

    def query_legacy(self, host: str, port: int) -> UpstreamLegacyStatus:
        """Return the legacy server list ping result of ``host``/``port``."""

        from mcstatus import LegacyServer

        try:
            status = LegacyServer(host, port, timeout=self._timeout).status()
        except Exception as error:
            raise QueryError(f"Legacy ping of {host}:{port} failed: {error}") from error

        version: Optional[UpstreamJavaVersion] = None
        if status.version is not None and status.version.protocol != _UNKNOWN_PROTOCOL:
            version = UpstreamJavaVersion(
                name=_format_text(status.version.name),
                protocol=status.version.protocol,
            )

        return UpstreamLegacyStatus(
            version=version,
            players=UpstreamJavaPlayers(online=status.players.online, max=status.players.max),
            motd=_render_motd(status.motd),
        )

    def query_bedrock(self, host: str, port: int) -> UpstreamBedrockStatus:
        """Return the Bedrock Edition status of ``host``/``port``.

        ``server_id`` is always ``None``: ``mcstatus`` parses the server GUID
        out of the pong but does not keep it on its response.
        """

        from mcstatus import BedrockServer

        try:
            status = BedrockServer(host, port, timeout=self._timeout).status()
        except Exception as error:
            raise QueryError(f"Bedrock query of {host}:{port} failed: {error}") from error

        version = status.version
        return UpstreamBedrockStatus(
            version=version.name or None,
            protocol_version=version.protocol,
            online_players=status.players.online,
            max_players=status.players.max,
            motd=_render_motd(status.motd),
            gamemode=status.gamemode or None,
            server_id=None,
            edition=version.brand or None,
        )


def _format_text(text: str) -> FormattedText:
    """Render a string that may contain section-sign formatting codes."""

    from mcstatus.motd import Motd

    return _render_motd(Motd.parse(text))


def _render_motd(motd: Any) -> FormattedText:
    return FormattedText(
        raw=motd.to_minecraft(),
        clean=motd.to_plain(),
        html=motd.to_html(),
    )


def _forge_mods(forge_data: Any) -> Optional[List[UpstreamMod]]:
    """Return the advertised mods, or ``None`` for servers without Forge data."""

    if forge_data is None:
        return None
    return [UpstreamMod(id=mod.name, version=mod.marker) for mod in forge_data.mods]
