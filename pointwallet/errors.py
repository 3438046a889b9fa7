"""Point service error taxonomy and the FastAPI handlers that render it."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pointwallet.app.logging import get_logger

logger = get_logger(__name__)


class PointError(Exception):
    """Base error raised by the point service; always a client error."""

    def __init__(self, message: str, code: str = "400", status_code: int = status.HTTP_400_BAD_REQUEST):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class InvalidUserIdError(PointError):
    def __init__(self, message: str = "invalid user id"):
        super().__init__(message)


class InvalidAmountError(PointError):
    def __init__(self, message: str = "invalid amount"):
        super().__init__(message)


class InsufficientPointError(PointError):
    def __init__(self, message: str = "insufficient points"):
        super().__init__(message)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"code": code, "message": message})


async def point_error_handler(request: Request, exc: PointError) -> JSONResponse:
    logger.warning("point_error", path=request.url.path, error=type(exc).__name__, message=exc.message)
    return error_response(exc.status_code, exc.code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("request_validation_error", path=request.url.path, errors=exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, "400", "invalid request")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", path=request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "500", "internal server error")


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PointError, point_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
