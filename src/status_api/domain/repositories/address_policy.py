"""Abstraction deciding whether a server address is blocked by Mojang."""
from __future__ import annotations

from typing import Protocol


class AddressPolicy(Protocol):
    """Report whether an address violates the game's EULA block list."""

    def is_blocked(self, host: str) -> bool:
        """Return ``True`` when ``host`` is on the block list."""

