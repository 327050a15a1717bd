"""
Origin gate for cross-origin requests.
"""

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:8080",
    "http://localhost:1234",
    "http://127.0.0.1:5500",
    "http://movies.com",
)


class OriginRejectedError(Exception):
    """Raised when a request comes from an origin outside the allow-list."""

    def __init__(self, origin: str):
        self.origin = origin
        super().__init__("Origin not allowed")


class OriginGate:
    """
    Exact-match allow-list of request origins.

    Requests without an Origin header (curl, server-to-server, same-origin
    navigation) are always let through.
    """

    def __init__(self, allowed_origins: Iterable[str] = DEFAULT_ALLOWED_ORIGINS):
        self.allowed_origins = tuple(allowed_origins)

    def is_allowed(self, origin: Optional[str]) -> bool:
        if not origin:
            return True
        return origin in self.allowed_origins

    def check(self, origin: Optional[str]) -> None:
        """
        Validate a request origin.

        Args:
            origin: Value of the Origin header, or None when absent

        Raises:
            OriginRejectedError: If the origin is present and not allowed
        """
        if not self.is_allowed(origin):
            logger.warning("Rejected request from origin %s", origin)
            raise OriginRejectedError(origin)
