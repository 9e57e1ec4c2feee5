"""
Request correlation ID middleware.

Reuses the caller's X-Request-ID when one is sent, otherwise mints a new
one. The ID is echoed on the response and bound to the request context for
the duration of the call.
"""

import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from migration_planner import requestid
from migration_planner.utils.logger import log_request

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns exactly one correlation ID to every request"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or requestid.generate()
        request.state.request_id = request_id

        token = requestid.new_context(request_id)
        start_time = time.time()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            log_request(
                request.method,
                request.url.path,
                response.status_code,
                duration_ms=(time.time() - start_time) * 1000,
            )
            return response
        finally:
            requestid.reset(token)


def get_request_id_from_request(request: Request) -> str:
    """Return the correlation ID assigned to request, or '' outside the middleware."""
    return getattr(request.state, "request_id", "")
