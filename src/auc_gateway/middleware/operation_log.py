"""Operation logging middleware.

One line per request naming the auction operation, the participant and bid
price taken from the path, the HTTP status, and the AppError code when the
operation was rejected. A short request id is stored on request.state so the
error envelope carries the same id.

    INFO place_bid user=alice price=50 → 200 (1ms) req_a1b2c3d4e5f6
    INFO check_asks user=bob → 403 code=3001 (0ms) req_0f1e2d3c4b5a
    INFO board → 200 (0ms) req_9a8b7c6d5e4f
"""

import logging
import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("auction.request")

_USER_OP_RE = re.compile(
    r"^/users/(?P<user>[^/]+)/(?P<op>ping|check_asks|place_bid)(?:/(?P<price>[^/]+))?/?$"
)
_ADMIN_OP_RE = re.compile(r"^/admin/(?P<op>board)/?$")


def describe_operation(path: str) -> str:
    """Render ``path`` as ``op user=.. price=..``; unknown paths pass through."""
    match = _USER_OP_RE.match(path)
    if match is not None:
        parts = [match["op"], f"user={match['user']}"]
        if match["price"] is not None:
            parts.append(f"price={match['price']}")
        return " ".join(parts)
    match = _ADMIN_OP_RE.match(path)
    if match is not None:
        return match["op"]
    return path


class OperationLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"
        request.state.error_code = None

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        outcome = f"{response.status_code}"
        if request.state.error_code is not None:
            outcome += f" code={request.state.error_code}"
        logger.info(
            "%s → %s (%.0fms) %s",
            describe_operation(request.url.path),
            outcome,
            elapsed_ms,
            request.state.request_id,
        )
        return response
