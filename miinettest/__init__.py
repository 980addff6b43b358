"""Local network details, active connection slot detection and HTTP request timing."""

__version__ = "0.1.0"
__all__ = ["netconfig", "ping", "netinfo", "cli"]