"""HMAC request signing and nonce generation for private endpoints."""

import hashlib
import hmac
import threading
import time
from typing import Callable, Optional, Union


def make_signature(
    nonce: str, url: str, body: Optional[Union[bytes, str]], secret: str
) -> str:
    """
    Sign a private request.

    The message is ``nonce + url + body`` with no separators, keyed by the
    API secret with HMAC-SHA256.

    Args:
        nonce: Nonce sent in the ACCESS-NONCE header
        url: Fully resolved request URL, query string included
        body: Raw request body; None or empty for bodiless requests
        secret: API secret

    Returns:
        Lowercase hex digest
    """
    if body is None:
        body = b""
    elif isinstance(body, str):
        body = body.encode("utf-8")

    mac = hmac.new(secret.encode("utf-8"), digestmod=hashlib.sha256)
    mac.update(nonce.encode("utf-8"))
    mac.update(url.encode("utf-8"))
    mac.update(body)
    return mac.hexdigest()


class NonceGenerator:
    """Strictly increasing nonces derived from the wall clock in nanoseconds."""

    def __init__(self, clock: Callable[[], int] = time.time_ns):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> str:
        """Return a nonce greater than every nonce issued before it."""
        with self._lock:
            value = max(self._clock(), self._last + 1)
            self._last = value
            return str(value)
