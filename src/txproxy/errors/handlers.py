"""Centralized FastAPI exception handlers.

Every failure reaching the HTTP boundary is caught exactly once, classified,
logged and answered with the flat error body. Known failures and HTTP
exceptions are handled here. Anything else is caught by RequestIDMiddleware,
which calls ``error_response`` so the response still carries the request id.
Nothing is retried and no internal detail is returned for system-caused
failures.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from txproxy.errors.classifier import classify
from txproxy.errors.formatter import format_error
from txproxy.errors.validation import field_failures
from txproxy.exceptions import InternalFailure, ValidationFailure


def error_response(failure: BaseException) -> JSONResponse:
    """Classify, log and answer one failure."""
    classification = classify(failure)
    body = format_error(classification)
    return JSONResponse(
        status_code=classification.status_code,
        content=body.model_dump(),
        headers=dict(classification.headers) if classification.headers else None,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the failure handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Answer rejected request fields with 400 and the resolved code."""
        return error_response(ValidationFailure(field_failures(exc.errors())))

    @app.exception_handler(InternalFailure)
    async def handle_internal_failure(_request: Request, exc: InternalFailure) -> JSONResponse:
        """Handle every known failure variant."""
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Give 404s, 405s and route-raised HTTP errors the flat body."""
        return error_response(exc)
