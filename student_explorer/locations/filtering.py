from __future__ import annotations

from collections.abc import Iterable

from .models import Location

RATING_FILTER_THRESHOLD = 4.0


def _matches_query(location: Location, needle: str) -> bool:
    return needle in location.name.lower() or needle in location.address.lower()


def filter_locations(
    locations: Iterable[Location],
    query: str = "",
    min_rating: float = 0.0,
) -> list[Location]:
    """
    Return the locations matching both the text query and the rating floor.

    The query is matched case-insensitively as a substring of the name or the
    address; a blank or whitespace-only query matches everything. The
    rating floor is inclusive, so ``min_rating=0`` matches everything.
    Order is preserved and the input is never modified.
    """
    needle = query.lower() if query.strip() else ""
    return [
        location
        for location in locations
        if location.rating >= min_rating and (not needle or _matches_query(location, needle))
    ]


def has_active_filters(query: str, min_rating: float) -> bool:
    return bool(query.strip()) or min_rating > 0
