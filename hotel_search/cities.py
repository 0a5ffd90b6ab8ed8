"""Static city name to upstream location_id directory."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from hotel_search.errors import INVALID_CITY, SearchValidationError

CITY_TO_LOCATION_ID: Mapping[str, int] = MappingProxyType(
    {
        "Paris": 1,
        "New York": 2,
        "California": 3,
        "Los Angeles": 5,
    }
)


def resolve_location_id(city: str) -> int:
    """Return the upstream location_id for ``city`` (exact, case-sensitive)."""

    location_id = CITY_TO_LOCATION_ID.get(city)
    if location_id is None:
        raise SearchValidationError(INVALID_CITY)
    return location_id


def known_cities() -> list[str]:
    return list(CITY_TO_LOCATION_ID)


__all__ = ["CITY_TO_LOCATION_ID", "known_cities", "resolve_location_id"]
