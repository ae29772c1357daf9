"""Domain models describing the client-facing server status schemas."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass(frozen=True)
class MOTD:
    """Message of the day rendered as raw, plain-text and HTML strings."""

    raw: str
    clean: str
    html: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready representation of the message of the day."""

        return {"raw": self.raw, "clean": self.clean, "html": self.html}


@dataclass(frozen=True)
class StatusResponse:
    """Fields shared by every status record, including offline ones."""

    online: bool
    host: str
    port: int
    eula_blocked: bool

    def to_dict(self) -> dict[str, Any]:
        """Return the base status fields as a dictionary."""

        return {
            "online": self.online,
            "host": self.host,
            "port": self.port,
            "eula_blocked": self.eula_blocked,
        }


@dataclass(frozen=True)
class JavaVersion:
    """Version reported by a Java Edition server."""

    name_raw: str
    name_clean: str
    name_html: str
    protocol: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name_raw": self.name_raw,
            "name_clean": self.name_clean,
            "name_html": self.name_html,
            "protocol": self.protocol,
        }


@dataclass(frozen=True)
class Player:
    """Entry of the player sample advertised by a Java Edition server."""

    uuid: str
    name_raw: str
    name_clean: str
    name_html: str

    def to_dict(self) -> dict[str, str]:
        return {
            "uuid": self.uuid,
            "name_raw": self.name_raw,
            "name_clean": self.name_clean,
            "name_html": self.name_html,
        }


@dataclass(frozen=True)
class JavaPlayers:
    """Player counts and sample list of a Java Edition server."""

    online: int
    max: int
    list: List[Player] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "online": self.online,
            "max": self.max,
            "list": [player.to_dict() for player in self.list],
        }


@dataclass(frozen=True)
class Mod:
    """Mod installed on a modded Java Edition server."""

    name: str
    version: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "version": self.version}


@dataclass(frozen=True)
class JavaStatusResponse:
    """Status of an online Java Edition server."""

    status: StatusResponse
    version: Optional[JavaVersion]
    players: JavaPlayers
    motd: MOTD
    icon: Optional[str] = None
    mods: List[Mod] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the base fields followed by the Java Edition specific ones."""

        payload = self.status.to_dict()
        payload.update(
            {
                "version": self.version.to_dict() if self.version is not None else None,
                "players": self.players.to_dict(),
                "motd": self.motd.to_dict(),
                "icon": self.icon,
                "mods": [mod.to_dict() for mod in self.mods],
            }
        )
        return payload


@dataclass(frozen=True)
class BedrockVersion:
    """Version details of a Bedrock Edition server; either field may be unknown."""

    name: Optional[str] = None
    protocol: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "protocol": self.protocol}


@dataclass(frozen=True)
class BedrockPlayers:
    """Player counts of a Bedrock Edition server; either count may be unknown."""

    online: Optional[int] = None
    max: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"online": self.online, "max": self.max}


@dataclass(frozen=True)
class BedrockStatusResponse:
    """Status of an online Bedrock Edition server.

    ``version`` and ``players`` are ``None`` only when the server reported
    none of their fields; once any field is known the container is present and
    the missing fields serialize as ``null``.
    """

    status: StatusResponse
    version: Optional[BedrockVersion] = None
    players: Optional[BedrockPlayers] = None
    motd: Optional[MOTD] = None
    gamemode: Optional[str] = None
    server_id: Optional[str] = None
    edition: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the base fields followed by the Bedrock Edition specific ones."""

        payload = self.status.to_dict()
        payload.update(
            {
                "version": self.version.to_dict() if self.version is not None else None,
                "players": self.players.to_dict() if self.players is not None else None,
                "motd": self.motd.to_dict() if self.motd is not None else None,
                "gamemode": self.gamemode,
                "server_id": self.server_id,
                "edition": self.edition,
            }
        )
        return payload


ServerStatus = Union[StatusResponse, JavaStatusResponse, BedrockStatusResponse]
