import time
import logging
import threading
from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware

UNMATCHED = "unmatched"


class Metrics:
    """Per-route request and error counts, keyed by route template."""

    def __init__(self):
        self._lock = threading.Lock()
        self.requests_total: Dict[str, int] = {}
        self.errors_total: Dict[str, int] = {}
        self.latency_ms: Dict[str, float] = {}

    def record(self, route: str, elapsed_ms: float, error: bool = False) -> None:
        with self._lock:
            self.requests_total[route] = self.requests_total.get(route, 0) + 1
            if error:
                self.errors_total[route] = self.errors_total.get(route, 0) + 1
            self.latency_ms[route] = elapsed_ms

    def snapshot(self) -> Dict[str, Dict]:
        with self._lock:
            return {
                "requests_total": dict(self.requests_total),
                "errors_total": dict(self.errors_total),
            }


metrics = Metrics()


def route_key(request) -> str:
    # the router stores the matched route in the shared scope; unknown urls share one bucket
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED


class MetricsMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, registry: Metrics = metrics):
        super().__init__(app)
        self.registry = registry

    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        rid = getattr(request.state, "request_id", "n/a")
        error = False
        try:
            return await call_next(request)
        except Exception:
            error = True
            logging.exception("[METRICS] request_id=%s route=%s error", rid, route_key(request))
            raise
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            route = route_key(request)
            self.registry.record(route, elapsed, error=error)
            logging.info("[METRICS] request_id=%s route=%s latency_ms=%.2f", rid, route, elapsed)
