"""
HTTP Error Mapping

Translates store errors and request validation failures into JSON error
responses. Registered on the app by ``setup_error_handling``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog_api.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Store-level validation failure -> 400."""
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.messages},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body schema failure -> 400 (FastAPI defaults to 422), same shape as store errors."""
    messages = ValidationError.from_errors(exc.errors()).messages
    logger.info(
        "%s %s rejected: %d validation errors",
        request.method,
        request.url.path,
        len(messages),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": messages},
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("%s %s: post %s not found", request.method, request.url.path, exc.post_id)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Post not found"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else (e.g. storage connectivity) -> 500 without internal details."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def setup_error_handling(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(NotFoundError, not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
