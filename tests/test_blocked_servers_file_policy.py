"""Tests for the SHA-1 block list address policy."""
from __future__ import annotations

import hashlib
from pathlib import Path

from status_api.infrastructure.repositories.blocked_servers_file_policy import (
    AllowAllAddressPolicy,
    BlockedServersFilePolicy,
)


def _digest(pattern: str) -> str:
    return hashlib.sha1(pattern.encode("utf-8")).hexdigest()


def _write_list(tmp_path: Path, *patterns: str) -> Path:
    file_path = tmp_path / "blockedservers.txt"
    lines = [_digest(pattern) for pattern in patterns]
    file_path.write_text("\n".join(lines) + "\n\n", encoding="utf-8")
    return file_path


def test_exact_host_is_blocked(tmp_path: Path) -> None:
    policy = BlockedServersFilePolicy(_write_list(tmp_path, "bad.example.com"))

    assert policy.is_blocked("bad.example.com") is True
    assert policy.is_blocked("good.example.com") is False


def test_host_matching_is_case_insensitive(tmp_path: Path) -> None:
    policy = BlockedServersFilePolicy(_write_list(tmp_path, "bad.example.com"))

    assert policy.is_blocked("BAD.Example.com") is True


def test_domain_wildcards_block_subdomains(tmp_path: Path) -> None:
    """A ``*.domain`` entry blocks every subdomain but not the bare domain."""

    policy = BlockedServersFilePolicy(_write_list(tmp_path, "*.example.org"))

    assert policy.is_blocked("play.example.org") is True
    assert policy.is_blocked("a.b.example.org") is True
    assert policy.is_blocked("example.org") is False


def test_ipv4_wildcards_block_address_ranges(tmp_path: Path) -> None:
    policy = BlockedServersFilePolicy(_write_list(tmp_path, "192.168.*"))

    assert policy.is_blocked("192.168.4.20") is True
    assert policy.is_blocked("10.0.0.1") is False


def test_uppercase_digests_in_file_are_accepted(tmp_path: Path) -> None:
    file_path = tmp_path / "blockedservers.txt"
    file_path.write_text(_digest("bad.example.com").upper() + "\n", encoding="utf-8")

    assert BlockedServersFilePolicy(file_path).is_blocked("bad.example.com") is True


def test_missing_file_blocks_nothing(tmp_path: Path) -> None:
    policy = BlockedServersFilePolicy(tmp_path / "missing.txt")

    assert policy.is_blocked("bad.example.com") is False


def test_allow_all_policy_never_blocks() -> None:
    assert AllowAllAddressPolicy().is_blocked("anything.example.com") is False
