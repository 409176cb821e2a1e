"""
Exception handlers producing the API's error bodies.

Every error response carries a single ``message`` key.  Route handlers
raise ``HTTPException`` for lookups that miss (404); request bodies
that cannot be decoded into an album are rejected by FastAPI with a
``RequestValidationError`` which is reported here as 400 instead of
FastAPI's default 422.
"""

import logging
from typing import Any, Dict, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import IndentedJSONResponse

logger = logging.getLogger(__name__)


def describe_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Flatten pydantic error entries into one human readable line.

    The leading ``body`` element of each location is dropped, so a bad
    price reads ``price: Input should be a valid number``.
    """
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        msg = error.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "invalid album body: " + "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> IndentedJSONResponse:
    return IndentedJSONResponse(
        {"message": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> IndentedJSONResponse:
    message = describe_validation_errors(exc.errors())
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return IndentedJSONResponse({"message": message}, status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
