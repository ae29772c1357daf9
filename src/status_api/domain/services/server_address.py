"""Helpers for splitting ``host[:port]`` server addresses."""
from __future__ import annotations

from dataclasses import dataclass

JAVA_DEFAULT_PORT = 25565
BEDROCK_DEFAULT_PORT = 19132

_MAX_PORT = 65535


@dataclass(frozen=True)
class ServerAddress:
    """Host and port of a game server."""

    host: str
    port: int


def parse_server_address(address: str, default_port: int) -> ServerAddress:
    """Return the host and port encoded in ``address``.

    The host is kept verbatim. ``default_port`` applies when no port is given.
    Bracketed IPv6 literals (``[::1]:25565``) are accepted; an unbracketed
    literal with several colons is treated as a host without port.
    """

    trimmed = address.strip()
    if not trimmed:
        raise ValueError("The server address must not be empty.")

    if trimmed.startswith("["):
        closing_index = trimmed.find("]")
        if closing_index == -1:
            raise ValueError("The server address has an unterminated IPv6 literal.")
        host = trimmed[1:closing_index]
        remainder = trimmed[closing_index + 1 :]
        if not remainder:
            return ServerAddress(host=_require_host(host), port=default_port)
        if not remainder.startswith(":"):
            raise ValueError("Unexpected characters after the IPv6 literal.")
        return ServerAddress(host=_require_host(host), port=_parse_port(remainder[1:]))

    if trimmed.count(":") == 1:
        host, raw_port = trimmed.split(":", 1)
        return ServerAddress(host=_require_host(host), port=_parse_port(raw_port))

    return ServerAddress(host=trimmed, port=default_port)


def _require_host(host: str) -> str:
    if not host:
        raise ValueError("The server address is missing a host.")
    return host


def _parse_port(raw_port: str) -> int:
    """Convert ``raw_port`` into a valid TCP/UDP port number."""

    if not (raw_port.isascii() and raw_port.isdigit()):
        raise ValueError(f"Invalid port: {raw_port!r}.")
    port = int(raw_port)
    if port > _MAX_PORT:
        raise ValueError(f"Port {port} is out of range.")
    return port
