from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from http import HTTPStatus
from starlette.exceptions import HTTPException as StarletteHTTPException

from vehicle_service.core.exceptions import APIException, InvalidRequestError
from vehicle_service.core.logging import get_logger, get_request_id, log_data

# Initialize logger
logger = get_logger(__name__)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or get_request_id() or "N/A"


async def handle_api_exception(request: Request, exc: APIException) -> JSONResponse:
    """
    Handle APIException instances.

    Args:
        request: FastAPI request object
        exc: APIException instance

    Returns:
        JSONResponse: Formatted error response
    """
    request_id = _request_id(request)
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        f"{exc.error_kind}: {exc.detail}",
        extra=log_data(
            status_code=exc.status_code,
            details=exc.details,
            path=request.url.path,
            method=request.method,
        )
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(request_id),
        headers={"X-Request-Id": request_id}
    )


async def handle_request_validation_exception(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request validation errors raised by FastAPI (malformed JSON body, wrong types).

    Args:
        request: FastAPI request object
        exc: RequestValidationError instance

    Returns:
        JSONResponse: Formatted ``Invalid`` error response
    """
    errors = []
    for error in exc.errors():
        errors.append({
            "loc": [str(part) for part in error["loc"]],
            "msg": error["msg"],
            "type": error["type"]
        })

    return await handle_api_exception(
        request,
        InvalidRequestError(detail="Request validation error", details={"errors": errors})
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render framework HTTP errors (unknown route, wrong method) in the shared error shape.
    """
    request_id = _request_id(request)
    error = "NotFound" if exc.status_code == status.HTTP_404_NOT_FOUND else HTTPStatus(exc.status_code).phrase.replace(" ", "")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": error,
            "message": str(exc.detail),
            "details": None,
            "requestId": request_id,
        },
        headers={**(exc.headers or {}), "X-Request-Id": request_id}
    )


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle anything outside the operational error taxonomy.

    Full details go to the log only; the caller gets an opaque message.
    """
    request_id = _request_id(request)
    logger.error(
        f"Unhandled exception: {str(exc)}",
        exc_info=exc,
        extra=log_data(path=request.url.path, method=request.method)
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "InternalServerError",
            "message": "Something went wrong",
            "details": None,
            "requestId": request_id,
        },
        headers={"X-Request-Id": request_id}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Configure global exception handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(APIException, handle_api_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
