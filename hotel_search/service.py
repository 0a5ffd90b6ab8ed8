"""Hotel search service: query parsing, upstream client and record sanitising."""

from __future__ import annotations

import logging
import re
import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, ValidationError

from hotel_search.errors import MISSING_PARAMETERS, SearchValidationError, UpstreamError
from shared.sanitize import sanitize_text

logger = logging.getLogger(__name__)

HotelRecord = dict[str, Any]

SANITIZED_FIELDS: tuple[str, ...] = ("title", "content", "image")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class SearchQuery(BaseModel):
    """Validated hotel search parameters for a single request."""

    model_config = ConfigDict(frozen=True)

    city: str = Field(..., min_length=1)
    checkin: str = Field(..., min_length=1)
    checkout: str = Field(..., min_length=1)
    adults: PositiveInt = 1
    children: NonNegativeInt = 0


class SearchResult(BaseModel):
    """Normalised upstream payload returned to the caller."""

    model_config = ConfigDict(frozen=True)

    total: int
    total_pages: int
    data: list[HotelRecord]


def _clean_param(params: Mapping[str, Any], key: str, default: str = "") -> str:
    return sanitize_text(params.get(key) or default)


def _parse_int(value: str) -> int:
    value = value.strip()
    if not _INTEGER_PATTERN.fullmatch(value):
        raise SearchValidationError(MISSING_PARAMETERS)
    return int(value)


def parse_search_query(params: Mapping[str, Any] | None) -> SearchQuery:
    """Sanitise raw query-string values and build a :class:`SearchQuery`.

    Raises :class:`SearchValidationError` when city/checkin/checkout are
    empty after sanitising or adults/children are not base-10 integers in
    range. Dates are passed through uninterpreted.
    """

    if params is None:
        params = {}
    if not isinstance(params, Mapping):
        raise SearchValidationError(MISSING_PARAMETERS)
    city = _clean_param(params, "city")
    checkin = _clean_param(params, "checkin")
    checkout = _clean_param(params, "checkout")
    adults = _parse_int(_clean_param(params, "adults", "1"))
    children = _parse_int(_clean_param(params, "children", "0"))

    try:
        return SearchQuery(
            city=city,
            checkin=checkin,
            checkout=checkout,
            adults=adults,
            children=children,
        )
    except ValidationError as exc:
        raise SearchValidationError(MISSING_PARAMETERS) from exc


def sanitize_records(records: Iterable[Mapping[str, Any]]) -> list[HotelRecord]:
    """Return copies of ``records`` with their free-text fields sanitised.

    Order is preserved and fields other than title/content/image are copied
    unchanged.
    """

    sanitized: list[HotelRecord] = []
    for record in records:
        cleaned = dict(record)
        for field in SANITIZED_FIELDS:
            cleaned[field] = sanitize_text(record.get(field))
        sanitized.append(cleaned)
    return sanitized


class HotelAPIClient:
    """HTTP client for the upstream hotel search endpoint.

    Successful payloads are kept for ``cache_ttl`` seconds keyed by the
    outbound URL, so repeated searches for the same location skip the
    network. Failures are never cached.
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        *,
        timeout: float = 10.0,
        cache_ttl: float = 3600.0,
        cache_size: int = 128,
        forward_stay_params: bool = False,
        transport: httpx.BaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._base_url = base_url
        self._auth = httpx.BasicAuth(username, password)
        self._timeout = timeout
        self._cache_ttl = cache_ttl
        self._cache_size = max(1, cache_size)
        self._forward_stay_params = forward_stay_params
        self._transport = transport
        self._clock = clock
        self._cache: OrderedDict[str, tuple[float, SearchResult]] = OrderedDict()
        self._lock = threading.Lock()

    def search(self, query: SearchQuery, location_id: int) -> SearchResult:
        params = self._build_params(query, location_id)
        cache_key = str(httpx.URL(self._base_url, params=params))
        cached = self._lookup(cache_key)
        if cached is not None:
            logger.debug("Hotel API cache hit for %s", cache_key)
            return cached

        result = _parse_result(self._perform_request(params))
        self._remember(cache_key, result)
        return result

    def _build_params(self, query: SearchQuery, location_id: int) -> dict[str, Any]:
        params: dict[str, Any] = {"location_id": location_id}
        if self._forward_stay_params:
            params.update(
                {
                    "checkin": query.checkin,
                    "checkout": query.checkout,
                    "adults": query.adults,
                    "children": query.children,
                }
            )
        return params

    def _perform_request(self, params: dict[str, Any]) -> Any:
        headers = {"Content-Type": "application/json"}
        try:
            with httpx.Client(
                timeout=self._timeout, transport=self._transport, follow_redirects=True
            ) as client:
                response = client.get(
                    self._base_url, params=params, headers=headers, auth=self._auth
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise UpstreamError(
                f"Hotel API search failed with status {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError("Hotel API search failed") from exc
        except ValueError as exc:
            raise UpstreamError("Hotel API returned a non-JSON body") from exc

    def _lookup(self, key: str) -> SearchResult | None:
        if self._cache_ttl <= 0:
            return None
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None
            stored_at, result = entry
            if self._clock() - stored_at >= self._cache_ttl:
                del self._cache[key]
                return None
            self._cache.move_to_end(key)
            return result

    def _remember(self, key: str, result: SearchResult) -> None:
        if self._cache_ttl <= 0:
            return
        with self._lock:
            self._cache[key] = (self._clock(), result)
            self._cache.move_to_end(key)
            if len(self._cache) > self._cache_size:
                self._cache.popitem(last=False)


def _parse_result(payload: Any) -> SearchResult:
    if not isinstance(payload, dict):
        raise UpstreamError("Hotel API returned an unexpected payload")
    try:
        return SearchResult.model_validate(payload)
    except ValidationError as exc:
        raise UpstreamError("Hotel API payload is missing total/total_pages/data") from exc


__all__ = [
    "HotelAPIClient",
    "HotelRecord",
    "SANITIZED_FIELDS",
    "SearchQuery",
    "SearchResult",
    "parse_search_query",
    "sanitize_records",
]
