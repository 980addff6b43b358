"""Command line entry point: show network details and time a request."""

from __future__ import annotations

import argparse

from .netconfig import CONFIG_PATH, ConfigReadError, read_active_connection
from .netinfo import gather
from .ping import DEFAULT_TIMEOUT, PingError, ping

DEFAULT_URL = "http://google.com/"
RULE = "=" * 41


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="miinettest", description="Show network details and time a request."
    )
    parser.add_argument("--config", default=CONFIG_PATH, help="network configuration file")
    parser.add_argument("--url", default=DEFAULT_URL, help="URL to request")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help="request timeout in seconds"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the connection test and return the exit status."""
    args = _parser().parse_args(argv)

    print("TestMiiInternet. Internet Speed Test")
    print(RULE)
    print("Initializing network...\n")

    info = gather()
    if info.connected:
        print("Network initialized.\n")
    else:
        print("Network initialization failed!")

    print("Network Information:\n")
    print(f"IP Address: {info.ip or 'Failed'}")
    print(f"MAC Address: {info.mac or 'Unavailable'}")

    try:
        active = read_active_connection(args.config)
    except ConfigReadError as exc:
        print(f"Failed to open config.dat: {exc}")
        return 1

    print(RULE)
    print(f"Testing Connection {active if active is not None else -1}...")
    print(f"Pinging: {args.url}")

    try:
        result = ping(args.url, args.timeout)
    except PingError:
        print("Ping test failed.")
    else:
        print(f"Ping time to {args.url}: {result.elapsed_ms:.2f} ms")
    return 0