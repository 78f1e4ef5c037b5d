"""Listing Policy — normalizes raw page/limit/sort query input into a fetch spec.

Invariants:
    - normalize_listing() never raises; bad input degrades to defaults
    - use_pagination iff page != 0 and limit != 0
    - offset = (page - 1) * limit when paginating (page is 1-indexed), else 0
    - sort_direction is ASC unless sort is exactly "asc" or "desc"

Design Decisions:
    - Strict integer grammar (optional sign + ASCII digits): int() alone would accept
      " 5 " and "1_0", which a query-string page number should not
    - Negative page/limit treated as absent: a negative offset or LIMIT is never useful
"""

import re
from dataclasses import dataclass

from storefront.core.domain_types import SortDirection

_INTEGER = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True)
class ListingSpec:
    """Normalized pagination and ordering for a listing query."""
    use_pagination: bool
    offset: int
    limit: int
    sort_direction: SortDirection


def _parse_count(raw: str | None) -> int:
    if raw is None or not _INTEGER.match(raw):
        return 0
    return max(int(raw), 0)


def normalize_listing(
    page: str | None, limit: str | None, sort: str | None,
) -> ListingSpec:
    """Translate raw query parameters into a ListingSpec."""
    page_n = _parse_count(page)
    limit_n = _parse_count(limit)
    use_pagination = page_n != 0 and limit_n != 0
    try:
        direction = SortDirection(sort)
    except ValueError:
        direction = SortDirection.ASC
    return ListingSpec(
        use_pagination=use_pagination,
        offset=(page_n - 1) * limit_n if use_pagination else 0,
        limit=limit_n,
        sort_direction=direction,
    )
