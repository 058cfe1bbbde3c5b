import re

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _parse_positive_int(raw, default: int) -> int:
    """Leading-integer parse ("3abc" -> 3); anything unusable or below 1 gives `default`."""
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    value = int(match.group(1))
    return value if value >= 1 else default


def page_window(page=None, limit=None) -> tuple[int, int]:
    """Return (offset, limit) for a 1-based page number. Limit has no upper bound."""
    page = _parse_positive_int(page, DEFAULT_PAGE)
    limit = _parse_positive_int(limit, DEFAULT_LIMIT)
    return (page - 1) * limit, limit
