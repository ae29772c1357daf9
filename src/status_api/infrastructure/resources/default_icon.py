"""Access to the placeholder icon served for servers without one."""
from __future__ import annotations

from pathlib import Path

DEFAULT_ICON_PATH = Path(__file__).resolve().parent / "default_icon.png"


def load_default_icon(icon_path: Path = DEFAULT_ICON_PATH) -> bytes:
    """Return the bytes of the placeholder PNG icon."""

    return icon_path.read_bytes()
