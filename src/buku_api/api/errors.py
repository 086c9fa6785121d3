import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from buku_api.errors import BukuNotFoundError
from buku_api.middleware import REQUEST_ID_HEADER
from buku_api.schemas.envelope import ErrorEnvelope

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    envelope = ErrorEnvelope(err_message=message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(by_alias=True))


def format_validation_errors(errors: Sequence[Any]) -> str:
    """Flattens pydantic error dicts into `loc: msg` pairs separated by `; `."""
    parts = []
    for err in errors:
        loc = ".".join(str(item) for item in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = format_validation_errors(exc.errors())
        logger.info(
            "request_validation_failed",
            extra={"method": request.method, "path": request.url.path, "detail": message},
        )
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(BukuNotFoundError)
    async def not_found_exception_handler(
        request: Request, exc: BukuNotFoundError
    ) -> JSONResponse:
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        message = str(exc) if debug else "A database error occurred"
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        message = str(exc) if debug else "An internal error occurred"
        response = error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
        # runs outside RequestContextMiddleware, so the id comes from request state
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response
