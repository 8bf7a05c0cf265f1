"""
In-memory OAuth access token cache

Holds at most one token and the instant (epoch milliseconds) after which it
must no longer be used. One instance is owned by each provider object.
"""

import time
from typing import Callable, Optional, Tuple

# Tokens are considered expired one minute before the provider says so
SAFETY_MARGIN_MS = 60_000


def _now_ms() -> int:
    return int(time.time() * 1000)


class TokenCache:
    """Single-slot token cache with a fixed early-expiry safety margin."""

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _now_ms
        # (token, expires_at) replaced as a whole on every store
        self._entry: Optional[Tuple[str, int]] = None

    @property
    def expires_at(self) -> Optional[int]:
        return self._entry[1] if self._entry else None

    def get_valid_token(self) -> Optional[str]:
        """Return the cached token, or None when the caller must refresh."""
        entry = self._entry
        if entry and entry[0] and self._clock() < entry[1]:
            return entry[0]
        return None

    def store(self, token: str, ttl_seconds: int) -> None:
        """
        Overwrite the cached token.

        Args:
            token: Access token returned by the provider
            ttl_seconds: Lifetime announced by the provider (expires_in)
        """
        expires_at = self._clock() + int(ttl_seconds) * 1000 - SAFETY_MARGIN_MS
        self._entry = (token, expires_at)

    def clear(self) -> None:
        self._entry = None
