"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every
route through SlowAPIMiddleware. Each application gets its own
Limiter so counters are never shared between app instances.
Exceeded limits are rendered by the shared error handlers.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(
    default_limit: str = DEFAULT_RATE_LIMIT, enabled: bool = True
) -> Limiter:
    """Create a Limiter keyed on the client address.

    Args:
        default_limit: Limit applied to every route, e.g. "60/minute".
        enabled: When False, requests are never limited.

    Returns:
        A Limiter using in-memory storage.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )
