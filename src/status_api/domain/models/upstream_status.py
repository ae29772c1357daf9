"""Records returned by the protocol query clients before normalization."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FormattedText:
    """A formatted string with its raw, stripped and HTML renderings."""

    raw: str
    clean: str
    html: str


@dataclass(frozen=True)
class UpstreamJavaVersion:
    """Version block reported by the modern and legacy Java queries."""

    name: FormattedText
    protocol: int


@dataclass(frozen=True)
class UpstreamPlayer:
    """Player sampled by the modern Java query."""

    id: str
    name: FormattedText


@dataclass(frozen=True)
class UpstreamJavaPlayers:
    """Player counts; ``sample`` is ``None`` when the server sent no sample."""

    online: int
    max: int
    sample: Optional[List[UpstreamPlayer]] = None


@dataclass(frozen=True)
class UpstreamMod:
    """Mod identifier and version advertised by a modded server."""

    id: str
    version: str


@dataclass(frozen=True)
class UpstreamJavaStatus:
    """Response of the modern Java Edition status query."""

    version: UpstreamJavaVersion
    players: UpstreamJavaPlayers
    motd: FormattedText
    favicon: Optional[str] = None
    mods: Optional[List[UpstreamMod]] = None


@dataclass(frozen=True)
class UpstreamLegacyStatus:
    """Response of the legacy Java Edition server list ping."""

    players: UpstreamJavaPlayers
    motd: FormattedText
    version: Optional[UpstreamJavaVersion] = None


@dataclass(frozen=True)
class UpstreamBedrockStatus:
    """Response of the Bedrock Edition status query; every field is optional."""

    version: Optional[str] = None
    protocol_version: Optional[int] = None
    online_players: Optional[int] = None
    max_players: Optional[int] = None
    motd: Optional[FormattedText] = None
    gamemode: Optional[str] = None
    server_id: Optional[str] = None
    edition: Optional[str] = None
