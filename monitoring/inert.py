"""In-memory metrics backend.

``InertMetricFactory`` satisfies the same contract as the Prometheus factory
without any exporter: values live in per-instrument dicts keyed by the stringified tuple of
label values. Label rules and fatal errors match the Prometheus adapter, so code
instrumented against one backend behaves identically against the other.

Reads never fail, hence ``read_value`` / ``read_info`` always report ``ok``.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from .exceptions import DuplicateMetricError
from .interfaces import ReadResult
from .labels import check_definition, labels_for, normalize_label_names

logger = logging.getLogger(__name__)


class _InertMetric:
    __slots__ = ("name", "label_names", "_lock")

    def __init__(self, name: str, label_names: tuple[str, ...]):
        self.name = name
        self.label_names = label_names
        self._lock = threading.Lock()

    def _key(self, label_values: Sequence[str]) -> tuple[str, ...]:
        # prometheus_client stringifies label values; 1 and "1" share a series
        labels_for(self.label_names, label_values)
        return tuple(str(v) for v in label_values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, label_names={self.label_names!r})"


class _InertValue(_InertMetric):
    """Single float per series, shared by counters and gauges."""

    __slots__ = ("_values",)

    def __init__(self, name: str, label_names: tuple[str, ...]):
        super().__init__(name, label_names)
        self._values: dict[tuple[str, ...], float] = {}

    def _add(self, key: tuple[str, ...], val: float) -> None:
        with self._lock:
            self._values[key] = self._values.get(key, 0.0) + val

    def read_value(self, *label_values: str) -> ReadResult:
        return ReadResult(self.value(*label_values))

    def value(self, *label_values: str) -> float:
        key = self._key(label_values)
        with self._lock:
            return self._values.get(key, 0.0)


class InertCounter(_InertValue):
    __slots__ = ()

    def inc(self, *label_values: str) -> None:
        self.add(1.0, *label_values)

    def add(self, val: float, *label_values: str) -> None:
        key = self._key(label_values)
        if val < 0:
            raise ValueError("Counters can only be incremented by non-negative amounts.")
        self._add(key, val)


class InertGauge(_InertValue):
    __slots__ = ()

    def inc(self, *label_values: str) -> None:
        self._add(self._key(label_values), 1.0)

    def dec(self, *label_values: str) -> None:
        self._add(self._key(label_values), -1.0)

    def add(self, val: float, *label_values: str) -> None:
        self._add(self._key(label_values), val)

    def set(self, val: float, *label_values: str) -> None:
        key = self._key(label_values)
        with self._lock:
            self._values[key] = float(val)


class InertHistogram(_InertMetric):
    """Keeps observation count and sum per series; no buckets."""

    __slots__ = ("_stats",)

    def __init__(self, name: str, label_names: tuple[str, ...]):
        super().__init__(name, label_names)
        self._stats: dict[tuple[str, ...], tuple[int, float]] = {}

    def observe(self, val: float, *label_values: str) -> None:
        key = self._key(label_values)
        with self._lock:
            count, total = self._stats.get(key, (0, 0.0))
            self._stats[key] = (count + 1, total + val)

    def read_info(self, *label_values: str) -> ReadResult:
        return ReadResult(self.info(*label_values))

    def info(self, *label_values: str) -> tuple[int, float]:
        key = self._key(label_values)
        with self._lock:
            return self._stats.get(key, (0, 0.0))


class InertMetricFactory:
    """MetricFactory that keeps every series in process memory.

    Final names are unique per factory instance; re-creating a name raises
    ``DuplicateMetricError`` just like a shared Prometheus registry would.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix
        self._names: set[str] = set()
        self._lock = threading.Lock()

    def new_counter(self, name: str, help: str, label_names: Sequence[str] | None = None) -> InertCounter:
        return InertCounter(*self._claim("counter", name, help, label_names))

    def new_gauge(self, name: str, help: str, label_names: Sequence[str] | None = None) -> InertGauge:
        return InertGauge(*self._claim("gauge", name, help, label_names))

    def new_histogram(self, name: str, help: str, label_names: Sequence[str] | None = None) -> InertHistogram:
        return InertHistogram(*self._claim("histogram", name, help, label_names))

    def _claim(self, kind: str, name: str, help: str,
               label_names: Sequence[str] | None) -> tuple[str, tuple[str, ...]]:
        check_definition(name, help)
        names = normalize_label_names(label_names)
        full_name = self.prefix + name
        with self._lock:
            if full_name in self._names:
                raise DuplicateMetricError(f"{kind} {full_name!r} already registered")
            self._names.add(full_name)
        logger.debug("created inert %s %s labels=%s", kind, full_name, list(names))
        return full_name, names


__all__ = ["InertMetricFactory", "InertCounter", "InertGauge", "InertHistogram"]
