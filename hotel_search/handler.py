"""AWS Lambda-style handler for the hotel search endpoint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from config.settings import get_settings
from hotel_search.cities import resolve_location_id
from hotel_search.responses import Stage, error_response, success_response
from hotel_search.service import (
    HotelAPIClient,
    SearchQuery,
    parse_search_query,
    sanitize_records,
)

logger = logging.getLogger(__name__)

_client: HotelAPIClient | None = None


def _get_client() -> HotelAPIClient:
    global _client
    if _client is None:
        settings = get_settings()
        logging.getLogger("hotel_search").setLevel(settings.log_level.upper())
        username, password = settings.credentials
        _client = HotelAPIClient(
            base_url=str(settings.hotel_api_endpoint),
            username=username,
            password=password,
            timeout=settings.hotel_api_timeout,
            cache_ttl=settings.hotel_api_cache_ttl,
            forward_stay_params=settings.hotel_api_forward_stay_params,
        )
    return _client


def handle_search(params: Mapping[str, Any] | None, client: HotelAPIClient) -> dict[str, Any]:
    """Run one search through validate, resolve, fetch and respond.

    The first failing stage short-circuits to an error response; nothing is
    retried and no partial result is returned.
    """

    stage = Stage.VALIDATING
    query: SearchQuery | None = None
    try:
        query = parse_search_query(params)
        stage = Stage.RESOLVING
        location_id = resolve_location_id(query.city)
        stage = Stage.FETCHING
        result = client.search(query, location_id)
        stage = Stage.RESPONDING
        result = result.model_copy(update={"data": sanitize_records(result.data)})
        response = success_response(result)
    except Exception as exc:
        city = query.city if query else _requested_city(params)
        return error_response(exc, city=city, stage=stage)

    logger.info("Hotel search completed for city: %s, results: %s", query.city, result.total)
    return response


def _requested_city(params: Any) -> Any:
    if isinstance(params, Mapping):
        return params.get("city")
    return None


def lambda_handler(event: dict[str, Any] | None, _context: Any | None = None) -> dict[str, Any]:
    """Entry point compatible with AWS Lambda (API Gateway proxy events)."""

    params = (event or {}).get("queryStringParameters") or {}
    try:
        client = _get_client()
    except Exception as exc:
        return error_response(exc, city=_requested_city(params))
    return handle_search(params, client)


__all__ = ["handle_search", "lambda_handler"]
