"""API Gateway response builders: success headers and error mapping."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

from hotel_search.errors import FETCH_FAILED, HotelSearchError, UpstreamError
from hotel_search.service import SearchResult

logger = logging.getLogger(__name__)

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}
SUCCESS_HEADERS: dict[str, str] = {
    "Content-Security-Policy": "default-src 'self'",
    "X-Content-Type-Options": "nosniff",
    "Cache-Control": "public, max-age=3600",
}


class Stage(str, Enum):
    """Pipeline stage a request was in when it finished or failed."""

    VALIDATING = "validating"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    RESPONDING = "responding"


class ErrorResponse(BaseModel):
    """Caller-facing error body."""

    error: str


def success_response(result: SearchResult) -> dict[str, Any]:
    return {
        "statusCode": 200,
        "headers": {**JSON_HEADERS, **SUCCESS_HEADERS},
        "body": result.model_dump_json(),
    }


def map_error(exc: BaseException) -> tuple[ErrorResponse, int]:
    """Translate an exception into the error body and HTTP status."""

    if isinstance(exc, HotelSearchError):
        return ErrorResponse(error=exc.public_message), exc.status_code or 500
    return ErrorResponse(error=FETCH_FAILED), 500


def error_response(
    exc: BaseException,
    *,
    city: str | None = None,
    stage: Stage | None = None,
) -> dict[str, Any]:
    """Log ``exc`` with request context and build the error response."""

    body, status = map_error(exc)
    upstream_status = exc.status_code if isinstance(exc, UpstreamError) else None
    logger.error(
        "Hotel search error at stage=%s city=%r upstream_status=%s: %s",
        stage.value if stage else None,
        city,
        upstream_status,
        exc,
        exc_info=exc,
        extra={
            "city": city,
            "upstream_status": upstream_status,
            "stage": stage.value if stage else None,
        },
    )
    return {
        "statusCode": status,
        "headers": dict(JSON_HEADERS),
        "body": body.model_dump_json(),
    }


__all__ = [
    "ErrorResponse",
    "JSON_HEADERS",
    "SUCCESS_HEADERS",
    "Stage",
    "error_response",
    "map_error",
    "success_response",
]
