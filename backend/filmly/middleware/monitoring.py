"""Monitoring and observability middleware"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from prometheus_client import Counter, Gauge, Histogram
from starlette.middleware.base import BaseHTTPMiddleware

from filmly.utils.logger import logger

SLOW_REQUEST_SECONDS = 1.0


# ===== Prometheus Metrics =====

# Request metrics
http_requests_total = Counter(
    "filmly_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

http_request_duration_seconds = Histogram(
    "filmly_http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"]
)

# Error metrics
http_errors_total = Counter(
    "filmly_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "status"]
)

# Domain metrics
authentication_failures_total = Counter(
    "filmly_authentication_failures_total",
    "Total authentication failures",
    ["reason"]  # missing, revoked, invalid
)

logins_total = Counter(
    "filmly_logins_total",
    "Total successful logins"
)

favorite_changes_total = Counter(
    "filmly_favorite_changes_total",
    "Total favorites mutations",
    ["operation"]  # add, remove
)

revoked_tokens_gauge = Gauge(
    "filmly_revoked_tokens",
    "Number of revoked tokens held in memory"
)


def _endpoint_label(request: Request) -> str:
    # Route templates keep label cardinality bounded
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class MonitoringMiddleware(BaseHTTPMiddleware):
    """Middleware for monitoring and metrics collection"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and collect metrics"""
        start_time = time.time()
        method = request.method

        # Add request ID for tracing
        request_id = request.headers.get("x-request-id") or f"req_{uuid.uuid4().hex[:12]}"
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            http_errors_total.labels(
                method=method,
                endpoint=_endpoint_label(request),
                status=500
            ).inc()

            logger.error(
                f"Request failed: {method} {request.url.path} ({duration:.3f}s): {e}",
                extra={"request_id": request_id},
                exc_info=True
            )
            raise

        status = response.status_code
        endpoint = _endpoint_label(request)
        duration = time.time() - start_time

        http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

        if duration > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request detected: {method} {endpoint} took {duration:.3f}s",
                extra={"request_id": request_id}
            )

        if status >= 400:
            http_errors_total.labels(method=method, endpoint=endpoint, status=status).inc()

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response


def record_auth_failure(reason: str):
    """Record authentication failure"""
    authentication_failures_total.labels(reason=reason).inc()


def record_login():
    logins_total.inc()


def record_favorite_change(operation: str):
    favorite_changes_total.labels(operation=operation).inc()


def set_revoked_tokens(count: int):
    revoked_tokens_gauge.set(count)
