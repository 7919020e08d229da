# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Metrics — In-memory counters for outbound requests and node executions.
"""

from __future__ import annotations

import time
from collections import defaultdict
from typing import Any, Dict, List

# Keep only the most recent observations per histogram
HISTOGRAM_WINDOW = 1000


class Metrics:
    """Simple in-memory metrics collector."""

    def __init__(self):
        self._counters: Dict[str, int] = defaultdict(int)
        self._gauges: Dict[str, float] = {}
        self._histograms: Dict[str, List[float]] = defaultdict(list)
        self._start_time = time.time()

    # ── Counters ────────────────────────────────────────────────

    def inc(self, name: str, amount: int = 1) -> None:
        self._counters[name] += amount

    def get_counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    # ── Gauges ──────────────────────────────────────────────────

    def set_gauge(self, name: str, value: float) -> None:
        self._gauges[name] = value

    def get_gauge(self, name: str) -> float:
        return self._gauges.get(name, 0.0)

    # ── Histograms (latency) ────────────────────────────────────

    def observe(self, name: str, value: float) -> None:
        """Record an observation (e.g. request latency in ms)."""
        window = self._histograms[name]
        window.append(value)
        if len(window) > HISTOGRAM_WINDOW:
            del window[: len(window) - HISTOGRAM_WINDOW]

    # ── Request helpers ─────────────────────────────────────────

    def record_request(self, method: str, status_code: int, elapsed_ms: float) -> None:
        """Count one completed outbound request, bucketed by status class."""
        self.inc("http_request:sent")
        self.inc(f"http_request:method:{method}")
        if status_code:
            self.inc(f"http_request:status:{status_code // 100}xx")
        self.observe("http_request:latency_ms", elapsed_ms)

    def record_failure(self, code: str) -> None:
        self.inc("http_request:error")
        self.inc(f"http_request:error:{code}")

    # ── Export ──────────────────────────────────────────────────

    def snapshot(self) -> Dict[str, Any]:
        """Export all metrics as a dict."""
        result: Dict[str, Any] = {
            "uptime_seconds": round(time.time() - self._start_time, 1),
            "counters": dict(self._counters),
            "gauges": dict(self._gauges),
        }
        for name, values in self._histograms.items():
            if values:
                result[f"histogram_{name}"] = {
                    "count": len(values),
                    "avg": round(sum(values) / len(values), 2),
                    "max": round(max(values), 2),
                    "min": round(min(values), 2),
                }
        return result

    def reset(self) -> None:
        self._counters.clear()
        self._gauges.clear()
        self._histograms.clear()


# Global singleton
platform_metrics = Metrics()
