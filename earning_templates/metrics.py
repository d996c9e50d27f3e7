"""
Lightweight runtime metrics for health/observability.

Uses in-process counters so it works without extra dependencies.
"""

from __future__ import annotations

import threading
import time
from collections import Counter, deque
from typing import Deque, Dict

from earning_templates.core.constants import ERROR_WINDOW_SECONDS


class _RuntimeMetrics:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._created: Counter = Counter()
        self._client_errors = 0
        self._error_timestamps: Deque[float] = deque()

    def record_earning_created(self, template_code: str) -> None:
        with self._lock:
            self._created[template_code] += 1

    def record_client_error(self) -> None:
        with self._lock:
            self._client_errors += 1

    def record_error(self, ts: float | None = None) -> None:
        now = ts if ts is not None else time.time()
        with self._lock:
            self._error_timestamps.append(now)
            self._prune_locked(now)

    def snapshot(self) -> Dict[str, object]:
        now = time.time()
        with self._lock:
            self._prune_locked(now)
            return {
                "earnings_created": sum(self._created.values()),
                "earnings_by_template": dict(self._created),
                "client_errors": self._client_errors,
                "errors_last_hour": len(self._error_timestamps),
            }

    def reset_for_tests(self) -> None:
        with self._lock:
            self._created.clear()
            self._client_errors = 0
            self._error_timestamps.clear()

    def _prune_locked(self, now: float) -> None:
        cutoff = now - ERROR_WINDOW_SECONDS
        while self._error_timestamps and self._error_timestamps[0] < cutoff:
            self._error_timestamps.popleft()


_METRICS = _RuntimeMetrics()


def record_earning_created(template_code: str) -> None:
    _METRICS.record_earning_created(template_code)


def record_client_error() -> None:
    _METRICS.record_client_error()


def record_error(ts: float | None = None) -> None:
    _METRICS.record_error(ts)


def metrics_snapshot() -> Dict[str, object]:
    return _METRICS.snapshot()


def reset_metrics_for_tests() -> None:
    _METRICS.reset_for_tests()
