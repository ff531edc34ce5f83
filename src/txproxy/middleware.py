"""Request tracing and the last-resort error boundary."""

import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from txproxy.errors.handlers import error_response

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and answer anything the handlers let through.

    The id comes from the caller's X-Request-ID header or a fresh UUID. It is
    bound, with method and path, to the structlog context for the duration of
    the request and echoed back on every response, error responses included.

    Exceptions with no registered handler are answered here rather than in
    Starlette's ServerErrorMiddleware, which would re-raise them after
    responding and log the failure a second time.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        ):
            try:
                response = await call_next(request)
            except Exception as exc:
                response = error_response(exc)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
