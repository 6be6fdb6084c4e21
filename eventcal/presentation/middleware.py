from __future__ import annotations

import json
import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)


def build_request_log_line(method: str, path: str, status: int, timestamp_ms: int) -> dict[str, str]:
    return {
        "status": str(status),
        "timestamp": str(timestamp_ms),
        "req_path": path,
        "req_method": method,
    }


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one JSON line per response: method, path, status and a millisecond timestamp."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            response = await call_next(request)
        except Exception:
            # the server error middleware turns this into a 500 further out
            self._log(request, 500)
            raise
        self._log(request, response.status_code)
        return response

    @staticmethod
    def _log(request: Request, status: int) -> None:
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        log_line = build_request_log_line(
            method=request.method,
            path=path,
            status=status,
            timestamp_ms=int(time.time() * 1000),
        )
        logger.info(json.dumps(log_line))
