"""
Exception handlers for the FastAPI application.

Every failure is answered with a short plain-text body and the matching
status code; there is no partial success.
"""

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from receipt_points.core.errors import MethodNotAllowedError, PointsServiceError
from receipt_points.core.observability import sentry_capture

logger = logging.getLogger(__name__)


def points_service_exception_handler(request: Request, exc: PointsServiceError):
    headers = {"Allow": "POST"} if isinstance(exc, MethodNotAllowedError) else None
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Routing errors (unknown path, wrong verb on a single-verb route)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def generic_exception_handler(request: Request, exc: Exception):
    logger.error("[error] unhandled path=%s method=%s", request.url.path, request.method, exc_info=exc)
    sentry_capture(exc)
    return PlainTextResponse("Internal server error", status_code=HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app) -> None:
    app.add_exception_handler(PointsServiceError, points_service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
