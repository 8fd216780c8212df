"""
Global exception handlers.

Rejected requests are answered with a plain‑text body holding the
error message and a trailing newline, the format existing clients of
this API parse.  Four handlers are registered:

* :class:`CertificateAPIError` raised by the services and by the body
  dependency;
* ``RequestValidationError`` for request data FastAPI rejects itself,
  reported as ``MalformedBodyError``;
* Starlette's ``HTTPException`` (unknown route, wrong method, an
  unparsable body), rendered as plain text with its own status;
* a catch‑all that answers 500 without leaking internal details.
"""

import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from certificate_api.app.core.errors import CertificateAPIError, MalformedBodyError

logger = logging.getLogger(__name__)

PLAIN_TEXT_HEADERS = {"X-Content-Type-Options": "nosniff"}


def error_response(exc: CertificateAPIError) -> PlainTextResponse:
    return PlainTextResponse(
        content=exc.message + "\n",
        status_code=exc.http_status,
        headers=PLAIN_TEXT_HEADERS,
    )


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Flatten pydantic error entries into ``loc: msg`` pairs."""
    parts = []
    for err in errors:
        loc = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid body"


def _log_rejection(request: Request, exc: CertificateAPIError) -> None:
    logger.warning(
        "%s %s rejected (%s): %s",
        request.method,
        request.url.path,
        exc.code,
        exc.message,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(CertificateAPIError)
    async def certificate_error_handler(request: Request, exc: CertificateAPIError):
        _log_rejection(request, exc)
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = MalformedBodyError(describe_validation_errors(exc.errors()))
        _log_rejection(request, error)
        return error_response(error)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_400_BAD_REQUEST:
            error = MalformedBodyError(str(exc.detail))
            _log_rejection(request, error)
            return error_response(error)
        headers = dict(PLAIN_TEXT_HEADERS)
        headers.update(exc.headers or {})
        return PlainTextResponse(
            content=f"{exc.detail}\n",
            status_code=exc.status_code,
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=True,
        )
        return PlainTextResponse(
            content="Internal server error.\n",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
