from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from currency_converter.core.logging import REQUEST_ID_HEADER
from currency_converter.services.clock import utc_timestamp
from currency_converter.services.rates.conversion import ConversionError

logger = logging.getLogger("currency_converter.errors")


def conversion_error_handler(request: Request, exc: ConversionError):  # type: ignore
    content = {"error": exc.message, "code": exc.code}
    content.update(exc.extra)
    content["timestamp"] = utc_timestamp()
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"No route for {request.method} {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message, "timestamp": utc_timestamp()},
        headers=getattr(exc, "headers", None),
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Malformed request",
            "code": "validation_error",
            "details": jsonable_encoder(exc.errors()),
            "timestamp": utc_timestamp(),
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    rid = getattr(request.state, "request_id", None)
    logger.error("unhandled exception", exc_info=exc, extra={"request_id": rid})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "An unexpected error occurred.",
            "code": "internal_error",
            "timestamp": utc_timestamp(),
        },
        headers={REQUEST_ID_HEADER: rid} if rid else None,
    )
