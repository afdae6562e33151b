"""Request logging middleware.

Every request gets a correlation id in request.state.request_id, echoed in
the X-Request-ID response header and in error envelopes. A well-formed
X-Request-ID sent by the caller (a wallet frontend or proxy) is reused so
its logs line up with ours; anything else is replaced.

Log format:
    INFO [GET] /api/v1/floor-price/azuki → 200 (412ms) req_a1b2c3d4e5f6

Health checks log at DEBUG; 5xx answers log at WARNING.
"""

import logging
import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("fd.request")

REQUEST_ID_HEADER = "X-Request-ID"
_INBOUND_ID = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")
_QUIET_PATHS = frozenset({"/health"})


def resolve_request_id(inbound: str | None) -> str:
    if inbound and _INBOUND_ID.match(inbound):
        return inbound
    return f"req_{uuid.uuid4().hex[:12]}"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        if request.url.path in _QUIET_PATHS:
            level = logging.DEBUG
        elif response.status_code >= 500:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
