from typing import Any
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from framework.config import settings
from framework.logging.logger import get_logger
from framework.response import ResponseModel

logger = get_logger("exception_handler")


class BusinessException(Exception):
    """Expected domain failure; rendered as-is to the client."""
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST, code: int = 400, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.detail = detail


class NotFoundException(BusinessException):
    """Referenced entity does not exist."""
    def __init__(self, message: str, detail: Any = None):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, code=404, detail=detail)


def _envelope(status_code: int, code: int, message: str, data: Any = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ResponseModel.fail(code=code, message=message, data=data))


async def business_exception_handler(request: Request, exc: BusinessException):
    logger.warning(f"BusinessError: {exc.message}")
    return _envelope(exc.status_code, exc.code, exc.message, exc.detail)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # ctx may hold exception instances that JSONResponse cannot encode
    errors = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
    logger.info(f"ValidationError: {errors}")
    return _envelope(status.HTTP_422_UNPROCESSABLE_ENTITY, 422, "Invalid request parameters", errors)


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.opt(exception=exc).critical(f"DatabaseError: {exc}")
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, 500, "Service temporarily unavailable")


async def unhandled_exception_handler(request: Request, exc: Exception):
    trace_id = getattr(request.state, "trace_id", None)
    logger.opt(exception=exc).error(f"UncaughtException: {exc}")
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        500,
        "System busy, please try again later",
        {"trace_id": trace_id} if settings.DEBUG else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BusinessException, business_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
