"""
Global exception handlers.

Every failure leaves the service as an ErrorResponse body:

- MovieHubError subclasses carry their own status, message and details
- Starlette routing errors (unknown path, wrong method) are mapped onto
  the same taxonomy
- anything else is a 500 whose text never reaches the client
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import MovieHubError, NotFoundError, UnsupportedOperationError
from .responses import MovieJSONResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(MovieHubError)
    async def movie_hub_error_handler(request: Request, exc: MovieHubError):
        return _render(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.debug(
            "%s %s -> %d", request.method, request.url.path, exc.status_code)
        return _render(_from_http_exception(exc), headers=exc.headers)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s %s", request.method, request.url.path,
            exc_info=exc,
        )
        return MovieJSONResponse(
            status_code=500, content={'error': 'internal server error'})


def _from_http_exception(exc: StarletteHTTPException) -> MovieHubError:
    if exc.status_code == 404:
        return NotFoundError('not found')
    if exc.status_code == 405:
        return UnsupportedOperationError('method not supported')
    error = MovieHubError(HTTPStatus(exc.status_code).phrase.lower())
    error.status_code = exc.status_code
    return error


def _render(exc: MovieHubError, headers=None) -> MovieJSONResponse:
    return MovieJSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(),
        headers=headers,
    )
