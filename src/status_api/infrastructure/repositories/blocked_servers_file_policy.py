"""Address policy backed by Mojang's list of blocked server hashes."""
from __future__ import annotations

import hashlib
import ipaddress
import logging
from pathlib import Path
from typing import Iterable, List

from status_api.domain.repositories.address_policy import AddressPolicy

logger = logging.getLogger(__name__)


class AllowAllAddressPolicy(AddressPolicy):
    """Policy used when no block list is configured."""

    def is_blocked(self, host: str) -> bool:
        return False


class BlockedServersFilePolicy(AddressPolicy):
    """Match hosts against SHA-1 digests read from a block list file.

    The file holds one lowercase hex digest per line, the format served by
    Mojang's session server. A host is blocked when the digest of the host
    itself, or of one of its wildcard patterns, appears in the list.
    """

    def __init__(self, file_path: Path) -> None:
        """Load the digests stored at ``file_path``; a missing file blocks nothing."""

        self._file_path = file_path
        self._digests = self._load_digests()

    def is_blocked(self, host: str) -> bool:
        """Return ``True`` when ``host`` or one of its wildcards is listed."""

        if not self._digests:
            return False
        return any(
            hashlib.sha1(candidate.encode("utf-8")).hexdigest() in self._digests
            for candidate in _candidate_patterns(host)
        )

    def _load_digests(self) -> frozenset[str]:
        if not self._file_path.exists():
            logger.warning("Blocked servers list %s not found, nothing is blocked", self._file_path)
            return frozenset()

        with self._file_path.open("r", encoding="utf-8") as input_file:
            digests = frozenset(_clean_lines(input_file))
        logger.info("Loaded %s blocked server hashes from %s", len(digests), self._file_path)
        return digests


def _clean_lines(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        stripped = line.strip().lower()
        if stripped:
            yield stripped


def _candidate_patterns(host: str) -> List[str]:
    """Return ``host`` followed by the wildcard patterns Mojang checks for it.

    Domain names expand to suffix wildcards (``*.b.c``, ``*.c``) and IPv4
    literals to prefix wildcards (``a.b.c.*``, ``a.b.*``, ``a.*``).
    """

    normalized = host.lower().rstrip(".")
    candidates = [normalized]
    parts = normalized.split(".")

    if _is_ipv4(normalized):
        for end in range(len(parts) - 1, 0, -1):
            candidates.append(".".join(parts[:end]) + ".*")
        return candidates

    for start in range(1, len(parts)):
        candidates.append("*." + ".".join(parts[start:]))
    return candidates


def _is_ipv4(host: str) -> bool:
    try:
        return isinstance(ipaddress.ip_address(host), ipaddress.IPv4Address)
    except ValueError:
        return False
