import threading
import time

from flask import current_app

EXTENSION_KEY = "performance_metrics"


class PerformanceMetrics:
    """Request counters shared by every worker thread of one application."""

    def __init__(self, slow_threshold_ms: float = 1000, clock=time.monotonic):
        self.slow_threshold_ms = slow_threshold_ms
        self._clock = clock
        self._lock = threading.Lock()
        self.requests = 0
        self.total_time_ms = 0.0
        self.slow_requests = 0
        self.start_time = clock()

    def record(self, elapsed_ms: float) -> None:
        with self._lock:
            self.requests += 1
            self.total_time_ms += elapsed_ms
            if elapsed_ms > self.slow_threshold_ms:
                self.slow_requests += 1

    def snapshot(self) -> dict:
        with self._lock:
            uptime = int(self._clock() - self.start_time)
            average = self.total_time_ms / self.requests if self.requests else 0
            return {
                "uptime": f"{uptime} seconds",
                "totalRequests": self.requests,
                "averageResponseTime": f"{average:.2f}ms",
                "slowRequests": self.slow_requests,
            }


def get_metrics() -> PerformanceMetrics:
    metrics = current_app.extensions.get(EXTENSION_KEY)
    if metrics is None:
        metrics = PerformanceMetrics(slow_threshold_ms=current_app.config.get("SLOW_REQUEST_MS", 1000))
        current_app.extensions[EXTENSION_KEY] = metrics
    return metrics
