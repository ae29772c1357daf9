"""Convert upstream query results into the client-facing status schemas."""
from __future__ import annotations

from typing import List, Optional

from status_api.domain.models.server_status import (
    MOTD,
    BedrockPlayers,
    BedrockStatusResponse,
    BedrockVersion,
    JavaPlayers,
    JavaStatusResponse,
    JavaVersion,
    Mod,
    Player,
    StatusResponse,
)
from status_api.domain.models.upstream_status import (
    FormattedText,
    UpstreamBedrockStatus,
    UpstreamJavaStatus,
    UpstreamJavaVersion,
    UpstreamLegacyStatus,
)


def build_offline_status(host: str, port: int, eula_blocked: bool) -> StatusResponse:
    """Return the bare record describing a server that did not answer."""

    return StatusResponse(online=False, host=host, port=port, eula_blocked=eula_blocked)


def build_java_status(
    host: str, port: int, eula_blocked: bool, upstream: UpstreamJavaStatus
) -> JavaStatusResponse:
    """Return the full Java Edition record built from a modern status query."""

    player_list: List[Player] = []
    if upstream.players.sample is not None:
        player_list = [
            Player(
                uuid=player.id,
                name_raw=player.name.raw,
                name_clean=player.name.clean,
                name_html=player.name.html,
            )
            for player in upstream.players.sample
        ]

    mod_list: List[Mod] = []
    if upstream.mods is not None:
        mod_list = [Mod(name=mod.id, version=mod.version) for mod in upstream.mods]

    return JavaStatusResponse(
        status=StatusResponse(online=True, host=host, port=port, eula_blocked=eula_blocked),
        version=_java_version(upstream.version),
        players=JavaPlayers(
            online=upstream.players.online,
            max=upstream.players.max,
            list=player_list,
        ),
        motd=_motd(upstream.motd),
        icon=upstream.favicon,
        mods=mod_list,
    )


def build_legacy_java_status(
    host: str, port: int, eula_blocked: bool, upstream: UpstreamLegacyStatus
) -> JavaStatusResponse:
    """Return the Java Edition record built from a legacy server list ping.

    The legacy protocol carries neither an icon nor mod metadata, so ``icon``
    is always ``None`` and ``mods`` always empty.
    """

    version: Optional[JavaVersion] = None
    if upstream.version is not None:
        version = _java_version(upstream.version)

    return JavaStatusResponse(
        status=StatusResponse(online=True, host=host, port=port, eula_blocked=eula_blocked),
        version=version,
        players=JavaPlayers(online=upstream.players.online, max=upstream.players.max),
        motd=_motd(upstream.motd),
        icon=None,
        mods=[],
    )


def build_bedrock_status(
    host: str, port: int, eula_blocked: bool, upstream: UpstreamBedrockStatus
) -> BedrockStatusResponse:
    """Return the Bedrock Edition record, creating nested containers on demand.

    ``version`` exists as soon as the name or the protocol is known and
    ``players`` as soon as either count is known; both stay ``None`` otherwise.
    """

    version: Optional[BedrockVersion] = None
    if upstream.version is not None or upstream.protocol_version is not None:
        version = BedrockVersion(name=upstream.version, protocol=upstream.protocol_version)

    players: Optional[BedrockPlayers] = None
    if upstream.online_players is not None or upstream.max_players is not None:
        players = BedrockPlayers(online=upstream.online_players, max=upstream.max_players)

    return BedrockStatusResponse(
        status=StatusResponse(online=True, host=host, port=port, eula_blocked=eula_blocked),
        version=version,
        players=players,
        motd=_motd(upstream.motd) if upstream.motd is not None else None,
        gamemode=upstream.gamemode,
        server_id=upstream.server_id,
        edition=upstream.edition,
    )


def _java_version(version: UpstreamJavaVersion) -> JavaVersion:
    return JavaVersion(
        name_raw=version.name.raw,
        name_clean=version.name.clean,
        name_html=version.name.html,
        protocol=version.protocol,
    )


def _motd(text: FormattedText) -> MOTD:
    return MOTD(raw=text.raw, clean=text.clean, html=text.html)
