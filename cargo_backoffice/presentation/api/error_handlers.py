"""Maps domain exceptions raised by the services onto HTTP responses.

Bodies keep FastAPI's ``{"detail": ...}`` shape so clients see one error
format whether the failure came from request validation or a service.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from cargo_backoffice.domain.exceptions import (
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidRequestError,
    StorageError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[Exception], int] = {
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateEntityError: status.HTTP_409_CONFLICT,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_response(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def setup_exception_handlers(app: FastAPI) -> None:
    async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
        status_code = next(
            code for error_type, code in _STATUS_BY_ERROR.items() if isinstance(exc, error_type)
        )
        if status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _error_response(status_code, str(exc))

    for error_type in _STATUS_BY_ERROR:
        app.add_exception_handler(error_type, domain_error_handler)

    @app.exception_handler(TimeoutError)
    async def timeout_handler(request: Request, exc: TimeoutError) -> JSONResponse:
        logger.warning("%s %s timed out", request.method, request.url.path)
        return _error_response(status.HTTP_504_GATEWAY_TIMEOUT, "operation timed out")
