from __future__ import annotations

import pytest

from hotel_search.cities import CITY_TO_LOCATION_ID, known_cities, resolve_location_id
from hotel_search.errors import INVALID_CITY, SearchValidationError


@pytest.mark.parametrize(
    ("city", "location_id"),
    [("Paris", 1), ("New York", 2), ("California", 3), ("Los Angeles", 5)],
)
def test_resolve_location_id_known_cities(city: str, location_id: int) -> None:
    assert resolve_location_id(city) == location_id


@pytest.mark.parametrize("city", ["Atlantis", "paris", "New  York", ""])
def test_resolve_location_id_rejects_unknown_cities(city: str) -> None:
    with pytest.raises(SearchValidationError) as excinfo:
        resolve_location_id(city)

    assert excinfo.value.public_message == INVALID_CITY


def test_directory_is_read_only() -> None:
    with pytest.raises(TypeError):
        CITY_TO_LOCATION_ID["Berlin"] = 9  # type: ignore[index]

    assert "Berlin" not in known_cities()
