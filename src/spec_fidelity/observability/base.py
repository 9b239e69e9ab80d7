# src/spec_fidelity/observability/base.py

import threading
from collections import defaultdict
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for pipeline metrics.

    Metric names live in :mod:`spec_fidelity.observability.names`. Hooks are
    called from worker threads during parsing and chunking, so
    implementations must be thread-safe.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


MetricKey = tuple[str, tuple[tuple[str, str], ...]]


def _key(name: str, labels: dict[str, str] | None) -> MetricKey:
    return name, tuple(sorted((labels or {}).items()))


class InMemoryMetricsHook:
    """Accumulates metrics in process, e.g. for a per-job report.

    Counters are summed, latencies are kept as samples and gauges keep
    their last value. Keyed by name plus sorted labels.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.counters: dict[MetricKey, int] = defaultdict(int)
        self.latencies: dict[MetricKey, list[float]] = defaultdict(list)
        self.gauges: dict[MetricKey, float] = {}

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        with self._lock:
            self.latencies[_key(name, labels)].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        with self._lock:
            self.counters[_key(name, labels)] += value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        with self._lock:
            self.gauges[_key(name, labels)] = value

    def count(self, name: str, labels: dict[str, str] | None = None) -> int:
        with self._lock:
            return self.counters.get(_key(name, labels), 0)

    def total(self, name: str) -> int:
        """Sum of a counter across all label sets."""
        with self._lock:
            return sum(v for (n, _), v in self.counters.items() if n == name)

    def gauge(self, name: str, labels: dict[str, str] | None = None) -> float | None:
        with self._lock:
            return self.gauges.get(_key(name, labels))
