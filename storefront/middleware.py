"""
middleware.py
Access log: method, path, status and latency for every request.
"""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("storefront.access")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            latency_ms = (time.perf_counter() - start) * 1000.0
            logger.info(
                "%s %s %s %.2fms",
                request.method,
                request.url.path,
                status,
                latency_ms,
            )
