"""Report the local IP and MAC address."""

from __future__ import annotations

import socket
import uuid
from dataclasses import dataclass

_MULTICAST_BIT = 1 << 40
_PROBE_ADDRESS = ("192.0.2.1", 80)


@dataclass(frozen=True)
class NetworkInfo:
    """Addresses of this host; None where one could not be found."""

    ip: str | None
    mac: str | None

    @property
    def connected(self) -> bool:
        return self.ip is not None


def format_mac(raw: bytes) -> str:
    """Format six raw bytes as an upper-case, colon-separated MAC address."""
    raw = bytes(raw)
    if len(raw) != 6:
        raise ValueError(f"a MAC address has 6 bytes, got {len(raw)}")
    return ":".join(f"{byte:02X}" for byte in raw)


def local_ip() -> str | None:
    """Return the IPv4 address used for outgoing traffic, or None."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            # A UDP connect only selects a route; nothing is sent.
            sock.connect(_PROBE_ADDRESS)
            address = sock.getsockname()[0]
    except OSError:
        return None
    return None if address == "0.0.0.0" else address


def mac_address() -> str | None:
    """Return the hardware address of this host, or None if unknown."""
    node = uuid.getnode()
    if node & _MULTICAST_BIT:
        # uuid falls back to a random node with the multicast bit set.
        return None
    return format_mac(node.to_bytes(6, "big"))


def gather() -> NetworkInfo:
    """Collect the local IP and MAC address."""
    return NetworkInfo(ip=local_ip(), mac=mac_address())