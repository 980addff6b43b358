"""Time a single HTTP request to a URL."""

from __future__ import annotations

import http.client
import time
import urllib.error
import urllib.request
from dataclasses import dataclass

DEFAULT_TIMEOUT = 10.0


class PingError(Exception):
    """The request could not be completed."""


@dataclass(frozen=True)
class PingResult:
    """Outcome of a completed request."""

    url: str
    status: int
    elapsed_ms: float


class _NoRedirect(urllib.request.HTTPRedirectHandler):
    """Report a redirect as the final response instead of following it."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        raise urllib.error.HTTPError(req.full_url, code, msg, headers, fp)


def ping(url: str, timeout: float = DEFAULT_TIMEOUT) -> PingResult:
    """Fetch *url* once, discarding the body, and report the total time taken.

    Redirects are not followed, and any HTTP status counts as a completed
    request. Transport failures raise :class:`PingError`.
    """
    if timeout <= 0:
        raise ValueError("timeout must be positive")
    opener = urllib.request.build_opener(_NoRedirect)
    start = time.perf_counter()
    try:
        with opener.open(url, timeout=timeout) as response:
            response.read()
            status = response.status
    except urllib.error.HTTPError as exc:
        status = exc.code
        try:
            exc.read()
        finally:
            exc.close()
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
        raise PingError(f"request to {url} failed: {exc}") from exc
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return PingResult(url=url, status=status, elapsed_ms=elapsed_ms)