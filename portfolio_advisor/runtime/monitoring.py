"""Structured tool-event logging and request metrics."""

from __future__ import annotations

import json
import logging
import threading
import time
from collections import Counter
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

LOGGER = logging.getLogger(__name__)
SLOW_TOOL_MS = 2000.0


@dataclass
class HealthSnapshot:
    uptime_seconds: float
    total_requests: int
    error_rate: float
    avg_latency_ms: float
    calls_by_tool: dict[str, int] = field(default_factory=dict)
    failures_by_tool: dict[str, int] = field(default_factory=dict)


class ServerMetrics:
    """Process-wide counters for tool calls, shared by every registered tool."""

    def __init__(self, started_at: float | None = None) -> None:
        self.started_at = started_at or time.time()
        self._lock = threading.Lock()
        self._calls: Counter[str] = Counter()
        self._failures: Counter[str] = Counter()
        self._latency_total_ms = 0.0

    def record(self, tool: str, latency_ms: float, success: bool) -> None:
        with self._lock:
            self._calls[tool] += 1
            if not success:
                self._failures[tool] += 1
            self._latency_total_ms += max(0.0, latency_ms)

    def snapshot(self) -> HealthSnapshot:
        with self._lock:
            calls = dict(self._calls)
            failures = dict(self._failures)
            latency_total = self._latency_total_ms
        total = sum(calls.values())
        return HealthSnapshot(
            uptime_seconds=max(0.0, time.time() - self.started_at),
            total_requests=total,
            error_rate=sum(failures.values()) / total if total else 0.0,
            avg_latency_ms=latency_total / total if total else 0.0,
            calls_by_tool=calls,
            failures_by_tool=failures,
        )


def log_tool_event(tool: str, latency_ms: float, success: bool, warning: str | None = None) -> None:
    event: dict[str, object] = {"tool": tool, "latency_ms": round(latency_ms, 3), "success": success, "ts": int(time.time())}
    if warning:
        event["warning"] = warning
    level = logging.INFO if success else logging.WARNING
    LOGGER.log(level, json.dumps(event, ensure_ascii=True))


@contextmanager
def track_tool(tool: str, metrics: ServerMetrics | None = None) -> Iterator[None]:
    """Record one tool call in the event log and, when given, the metrics."""
    started = time.perf_counter()
    success = False
    try:
        yield
        success = True
    finally:
        latency_ms = (time.perf_counter() - started) * 1000.0
        log_tool_event(tool, latency_ms, success, warning="slow_response" if latency_ms > SLOW_TOOL_MS else None)
        if metrics is not None:
            metrics.record(tool, latency_ms, success)
