"""Converter error kinds and the FastAPI handlers that render them.

All domain errors derive from ``ConverterError`` so the UI boundary can catch
one type and show ``str(exc)`` to the user.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

logger = logging.getLogger("fxconvert.errors")


class ConverterError(Exception):
    """Base class for failures surfaced to the user as a message."""

    error_kind = "converter_error"
    status_code = status.HTTP_400_BAD_REQUEST


class RatesUnavailable(ConverterError):
    """Neither the primary nor the fallback source produced a rate table."""

    error_kind = "rates_unavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RatesNotLoaded(ConverterError):
    error_kind = "rates_not_loaded"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, message: str = "Rates not loaded"):
        super().__init__(message)


class UnknownCurrency(ConverterError):
    error_kind = "unknown_currency"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, codes: Iterable[str], message: Optional[str] = None):
        self.codes = tuple(codes)
        if message is None:
            message = "Missing rate for " + " or ".join(self.codes)
        super().__init__(message)


class AmountOutOfRange(ConverterError):
    """Converted value overflows a float and cannot be returned as JSON."""

    error_kind = "amount_out_of_range"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


def http_error_handler(request: Request, exc):  # type: ignore
    if getattr(exc, "status_code", 404) != status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "http_error", "detail": exc.detail},
        )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "not_found",
            "detail": f"No route for {request.method} {request.url.path}",
        },
    )


def _field_errors(errors) -> list:
    """Flatten pydantic errors to {"field", "message"} pairs (query/body prefix dropped)."""
    out = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("query", "body", "path")]
        out.append({"field": ".".join(loc) or "-", "message": err.get("msg", "invalid value")})
    return out


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "validation_error", "detail": _field_errors(exc.errors())},
    )


def converter_error_handler(request: Request, exc: ConverterError):  # type: ignore
    logger.info("converter error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error_kind, "detail": str(exc)},
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    # request id is quoted back so a user report can be matched to the log line
    request_id = getattr(request.state, "request_id", "-")
    logger.exception("unhandled exception on %s (request_id=%s)", request.url.path, request_id)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": f"Conversion service error (request {request_id}).",
        },
    )
