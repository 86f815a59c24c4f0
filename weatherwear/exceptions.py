"""
Domain exceptions and the JSON handler that renders them.

Every error leaving a store or service is a ``WeatherwearError`` carrying
its own HTTP status, so routes never translate errors by hand.
"""
from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class WeatherwearError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    code = "WEATHERWEAR_ERROR"

    def __init__(
        self, message: str, code: str | None = None, status_code: int | None = None
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        return {"detail": self.message, "code": self.code}


class NotFoundError(WeatherwearError):
    status_code = 404
    code = "NOT_FOUND"


class PermissionDeniedError(WeatherwearError):
    status_code = 403
    code = "FORBIDDEN"


class ConflictError(WeatherwearError):
    status_code = 409
    code = "CONFLICT"


class AuthenticationError(WeatherwearError):
    status_code = 401
    code = "UNAUTHORIZED"


class WeatherServiceError(WeatherwearError):
    """The upstream weather provider failed or returned garbage."""

    status_code = 502
    code = "WEATHER_UNAVAILABLE"


async def weatherwear_exception_handler(
    request: Request, exc: WeatherwearError
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
