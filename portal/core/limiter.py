"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings are read from settings at
request time, not at import.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from portal.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def search_limit() -> str:
    """Per-client limit for GET /search (SEARCH_RATE_LIMIT)."""
    return get_settings().search_rate_limit


limit_search = limiter.limit(search_limit)
