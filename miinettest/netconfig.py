"""Locate the active connection slot in a console network configuration file."""

from __future__ import annotations

from pathlib import Path

CONFIG_PATH = "/shared2/sys/net/02/config.dat"
SLOT_OFFSETS = (8, 2340, 4672)
ACTIVE_THRESHOLD = 0xA0


class ConfigReadError(Exception):
    """The network configuration file could not be read."""


def active_connection(data: bytes) -> int | None:
    """Return the 1-based number of the first active slot, or None.

    A slot is active when its flag byte is above ``ACTIVE_THRESHOLD``.
    A flag byte past the end of the data counts as zero.
    """
    for number, offset in enumerate(SLOT_OFFSETS, start=1):
        flag = data[offset] if offset < len(data) else 0
        if flag > ACTIVE_THRESHOLD:
            return number
    return None


def read_active_connection(path: str | Path = CONFIG_PATH) -> int | None:
    """Read the configuration file at *path* and return its active slot."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ConfigReadError(f"cannot read {path}: {exc}") from exc
    return active_connection(data)