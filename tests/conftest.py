"""Test configuration and shared collaborators for the status API tests."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Union


def _ensure_src_on_path() -> None:
    """Add the project's ``src`` directory to ``sys.path`` when missing."""

    project_root = Path(__file__).resolve().parents[1]
    src_path = project_root / "src"
    src_path_str = str(src_path)
    if src_path_str not in sys.path:
        sys.path.insert(0, src_path_str)


_ensure_src_on_path()

import pytest  # noqa: E402

from status_api.domain.models.upstream_status import (  # noqa: E402
    FormattedText,
    UpstreamBedrockStatus,
    UpstreamJavaPlayers,
    UpstreamJavaStatus,
    UpstreamJavaVersion,
    UpstreamLegacyStatus,
)
from status_api.domain.repositories.status_query_client import QueryError  # noqa: E402

_Outcome = Union[object, Exception, None]


class StubQueryClient:
    """Query client returning preconfigured results and recording each call."""

    def __init__(
        self,
        java: _Outcome = None,
        legacy: _Outcome = None,
        bedrock: _Outcome = None,
    ) -> None:
        self._outcomes = {"java": java, "legacy": legacy, "bedrock": bedrock}
        self.calls: list[tuple[str, str, int]] = []

    def query_java(self, host: str, port: int) -> UpstreamJavaStatus:
        return self._answer("java", host, port)

    def query_legacy(self, host: str, port: int) -> UpstreamLegacyStatus:
        return self._answer("legacy", host, port)

    def query_bedrock(self, host: str, port: int) -> UpstreamBedrockStatus:
        return self._answer("bedrock", host, port)

    def _answer(self, kind: str, host: str, port: int):
        self.calls.append((kind, host, port))
        outcome = self._outcomes[kind]
        if outcome is None:
            raise QueryError(f"{kind} query refused")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class StubAddressPolicy:
    """Address policy blocking exactly the configured hosts."""

    def __init__(self, *blocked_hosts: str) -> None:
        self._blocked_hosts = set(blocked_hosts)
        self.checked: list[str] = []

    def is_blocked(self, host: str) -> bool:
        self.checked.append(host)
        return host in self._blocked_hosts


class FakeClock:
    """Monotonic clock advanced manually by the tests."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def formatted(text: str) -> FormattedText:
    """Return a triple whose renderings are easy to tell apart in assertions."""

    return FormattedText(raw=f"§a{text}", clean=text, html=f"<span>{text}</span>")


@pytest.fixture
def make_query_client() -> Callable[..., StubQueryClient]:
    """Return a factory building stub query clients."""

    return StubQueryClient


@pytest.fixture
def make_address_policy() -> Callable[..., StubAddressPolicy]:
    """Return a factory building address policies blocking the given hosts."""

    return StubAddressPolicy


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def java_upstream() -> UpstreamJavaStatus:
    """A modern status answer with players but neither sample nor mods."""

    return UpstreamJavaStatus(
        version=UpstreamJavaVersion(name=formatted("Paper 1.21.1"), protocol=767),
        players=UpstreamJavaPlayers(online=5, max=20),
        motd=formatted("A Minecraft Server"),
        favicon=None,
        mods=None,
    )


@pytest.fixture
def legacy_upstream() -> UpstreamLegacyStatus:
    """A legacy ping answer carrying a version block."""

    return UpstreamLegacyStatus(
        version=UpstreamJavaVersion(name=formatted("1.6.4"), protocol=78),
        players=UpstreamJavaPlayers(online=2, max=10),
        motd=formatted("Old school"),
    )


@pytest.fixture
def bedrock_upstream() -> UpstreamBedrockStatus:
    """A Bedrock answer with every field reported."""

    return UpstreamBedrockStatus(
        version="1.21.2",
        protocol_version=686,
        online_players=3,
        max_players=30,
        motd=formatted("Bedrock world"),
        gamemode="Survival",
        server_id="12345678901234567890",
        edition="MCPE",
    )
