"""Page resolution for list endpoints.

Turns the raw ``page`` query parameter into a ``PageWindow`` carrying the
SKIP/LIMIT values bound into list queries. Bad input never raises; it
falls back to the first page.
"""

import re
from dataclasses import dataclass
from typing import Union

from citygraph.core.constants import DEFAULT_PAGE, MAX_STORE_INTEGER, PAGE_SIZE

# ASCII digits only; leading zeros are dropped before the length check
_LEADING_INT = re.compile(r"^\s*([+-]?)0*([0-9]+)")

# Highest page whose skip still fits in a store integer
MAX_PAGE = MAX_STORE_INTEGER // PAGE_SIZE + 1
_MAX_PAGE_DIGITS = len(str(MAX_PAGE))


@dataclass(frozen=True)
class PageWindow:
    """Resolved pagination window."""

    page: int
    skip: int
    limit: int


def parse_page(raw: Union[str, int, None]) -> int:
    """
    Parse a raw page value into a page number >= 1.

    Leading whitespace and a sign are accepted and anything after the
    leading digits is ignored, so ``"2abc"`` is page 2 and ``"1.9"`` is
    page 1. Only ASCII digits count. Missing, unparsable and non-positive
    values give page 1; digit runs too long for a store integer give
    ``MAX_PAGE`` without being converted.

    Args:
        raw: Query parameter value (or None when absent)

    Returns:
        Page number in [1, MAX_PAGE]
    """
    if raw is None or isinstance(raw, bool):
        return DEFAULT_PAGE

    if isinstance(raw, int):
        page = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if match is None:
            return DEFAULT_PAGE
        sign, digits = match.groups()
        if sign == "-":
            return DEFAULT_PAGE
        if len(digits) > _MAX_PAGE_DIGITS:
            return MAX_PAGE
        page = int(digits)

    if page < 1:
        return DEFAULT_PAGE
    return min(page, MAX_PAGE)


def resolve_page(raw: Union[str, int, None] = None) -> PageWindow:
    """
    Resolve a raw page value into page, skip and limit.

    Args:
        raw: Query parameter value (or None when absent)

    Returns:
        PageWindow with ``skip = (page - 1) * PAGE_SIZE`` and ``limit = PAGE_SIZE``
    """
    page = parse_page(raw)
    return PageWindow(page=page, skip=(page - 1) * PAGE_SIZE, limit=PAGE_SIZE)
