"""Exception handlers producing structured JSON error bodies"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sales_dashboard.api.dependencies import get_request_id
from sales_dashboard.domain.exceptions import InvalidQueryError, SeedSourceError

HTTP_ERROR_CODES = {
    404: "not_found",
    405: "method_not_allowed",
}


def error_response(request: Request, status_code: int, error: str, detail, headers=None) -> JSONResponse:
    request_id = get_request_id(request)
    # The 500 handler runs outside RequestIDMiddleware, so set the header here too
    response_headers = dict(headers or {})
    response_headers["X-Request-ID"] = request_id
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail, "request_id": request_id},
        headers=response_headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = HTTP_ERROR_CODES.get(exc.status_code, "http_error")
    return error_response(request, exc.status_code, error, exc.detail, headers=exc.headers)


async def invalid_query_handler(request: Request, exc: InvalidQueryError) -> JSONResponse:
    logging.warning(f"Invalid query: {exc}", extra={"request_id": get_request_id(request)})
    return error_response(request, 400, "validation_error", str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return error_response(request, 400, "validation_error", detail)


async def seed_source_handler(request: Request, exc: SeedSourceError) -> JSONResponse:
    logging.error(f"Seed source error: {exc}", extra={"request_id": get_request_id(request)})
    return error_response(request, 502, "upstream_seed_failure", str(exc))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.exception(f"Unexpected error: {exc}", extra={"request_id": get_request_id(request)})
    return error_response(request, 500, "internal_error", "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(InvalidQueryError, invalid_query_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SeedSourceError, seed_source_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
