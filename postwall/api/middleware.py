"""
Request middleware: propagates the request id header and logs one line per request.
"""
import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request

from postwall.api.error_handlers import unhandled_error_response
from postwall.core.config import settings
from postwall.utils.metrics import http_request_duration_seconds, http_requests_total

logger = logging.getLogger("http")


def register_request_logging(app: FastAPI) -> None:

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        header = settings.request_id_header
        request_id = request.headers.get(header) or uuid4().hex
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            # Answered here so unhandled errors keep the request id header
            response = unhandled_error_response(request, exc)
        elapsed = time.perf_counter() - started

        response.headers[header] = request_id
        http_requests_total.labels(method=request.method, status=str(response.status_code)).inc()
        http_request_duration_seconds.labels(method=request.method).observe(elapsed)
        logger.info(
            "http_request",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "latency_ms": round(elapsed * 1000, 2),
            },
        )
        return response
