"""FastAPI middleware for request tracing and the catch-all fault boundary."""

import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from game_catalog.logging import get_logger
from game_catalog.schemas.error import FaultResponse

REQUEST_ID_HEADER = "X-Request-ID"
FAULT_MESSAGE = (
    "Ocorreu um erro durante sua solicitação, por favor, tente novamente mais tarde"
)

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add request ID to every request for tracing.

    - Reads X-Request-ID from request headers, or generates a UUID if missing
    - Binds request_id to structlog context (auto-included in all logs)
    - Adds X-Request-ID to response headers
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class FaultBoundaryMiddleware(BaseHTTPMiddleware):
    """Turn any exception that escaped the routers into a generic 500.

    Registered once, inside RequestIDMiddleware, so faulted responses still
    carry the request id. The client only ever sees FAULT_MESSAGE; the
    traceback goes to the log.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("unhandled_exception", path=request.url.path, method=request.method)
            return JSONResponse(
                status_code=500,
                content=FaultResponse(Message=FAULT_MESSAGE).model_dump(),
            )
