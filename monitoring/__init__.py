"""Backend-neutral counters, gauges and histograms.

Stable import surfaces:
    from monitoring import MetricFactory, Counter, Gauge, Histogram   (protocols)
    from monitoring.prometheus import MetricFactory                    (prometheus_client backend)
    from monitoring.inert import InertMetricFactory                    (in-memory backend)

The Prometheus backend is imported lazily by callers so that code depending only
on the protocols does not pull in prometheus_client.
"""
from __future__ import annotations

from .exceptions import (
    DuplicateMetricError,
    InvalidMetricError,
    LabelCardinalityError,
    MetricUsageError,
    MonitoringError,
    SnapshotError,
)
from .inert import InertMetricFactory
from .interfaces import Counter, Gauge, Histogram, MetricFactory, ReadResult
from .settings import MetricsSettings

__all__ = [
    "Counter",
    "Gauge",
    "Histogram",
    "MetricFactory",
    "ReadResult",
    "InertMetricFactory",
    "MetricsSettings",
    "MonitoringError",
    "MetricUsageError",
    "LabelCardinalityError",
    "DuplicateMetricError",
    "InvalidMetricError",
    "SnapshotError",
]
