"""예외 → HTTP 응답 매핑

- ValidationException / RequestValidationError → 400
- Database/Cache 예외 → 503
- Gateway 예외 → 502 (타임아웃 504)
- 그 외 → 500 "Internal Server Error"

응답 본문은 항상 {"message", "error", "error_code"} 입니다.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.core.exceptions import StorefrontException, ValidationException
from storefront.core.logging import logger

_MESSAGES = {
    400: "Bad Request",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
}


def error_body(status_code: int, error: str, error_code: str) -> dict:
    return {
        "message": _MESSAGES.get(status_code, "Internal Server Error"),
        "error": error,
        "error_code": error_code,
    }


async def storefront_exception_handler(request: Request, exc: StorefrontException) -> JSONResponse:
    status_code = exc.http_status
    if status_code >= 500:
        logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"[API] {request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status_code, content=error_body(status_code, exc.message, exc.error_code))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    validation = ValidationException.from_errors(list(exc.errors()))
    logger.warning(f"[API] {request.method} {request.url.path} invalid input: {validation.field}")
    return JSONResponse(
        status_code=validation.http_status,
        content=error_body(validation.http_status, validation.message, validation.error_code),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"[API] {request.method} {request.url.path} unexpected error", exc_info=exc)
    return JSONResponse(status_code=500, content=error_body(500, str(exc), "INTERNAL_ERROR"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontException, storefront_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
