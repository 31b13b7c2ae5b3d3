"""FastAPI middleware."""

import time

from fastapi import Request, Response
from loguru import logger
from prometheus_client import CollectorRegistry, Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

UNMATCHED_ENDPOINT = "unmatched"


class RequestMetrics:
    """Prometheus request metrics bound to one registry."""

    def __init__(self, registry: CollectorRegistry):
        self.registry = registry
        self.request_count = Counter(
            "http_requests_total",
            "Total count of HTTP requests",
            ["method", "endpoint", "status"],
            registry=registry,
        )
        self.request_latency = Histogram(
            "http_request_duration_seconds",
            "HTTP request latency in seconds",
            ["method", "endpoint"],
            registry=registry,
        )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log every request with its status and duration."""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "{} {} {} {:.2f}ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics."""

    def __init__(self, app: ASGIApp, metrics: RequestMetrics):
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Collect Prometheus metrics."""
        method = request.method

        start_time = time.time()
        response = await call_next(request)

        # label by route template so per-file URLs share one series
        route = request.scope.get("route")
        path = getattr(route, "path", None) or UNMATCHED_ENDPOINT

        self.metrics.request_count.labels(
            method=method, endpoint=path, status=response.status_code
        ).inc()
        self.metrics.request_latency.labels(method=method, endpoint=path).observe(
            time.time() - start_time
        )

        return response
