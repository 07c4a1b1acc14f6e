"""Search request normalization: trimmed term and per-source limit."""

import re

from portal.application.dtos.search import SearchQuery

DEFAULT_LIMIT = 50

# Optional sign and leading digits; anything after them is ignored ("10abc" -> 10).
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw: str | None, default: int = DEFAULT_LIMIT) -> int:
    """Parse the limit query parameter from its leading integer.

    Trailing characters after the digits are ignored, so "1.5" is 1. Missing,
    malformed, or non-positive values fall back to default. There is no upper
    bound; the value caps each source separately.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    value = int(match.group(1))
    return value if value > 0 else default


def normalize_query(
    raw_term: str | None, raw_limit: str | None, default_limit: int = DEFAULT_LIMIT
) -> SearchQuery:
    raw = raw_term or ""
    return SearchQuery(
        raw_term=raw,
        term=raw.strip(),
        limit=parse_limit(raw_limit, default_limit),
    )
