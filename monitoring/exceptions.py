"""Monitoring exception hierarchy.

Two tiers:

* ``MetricUsageError`` and its subclasses signal programmer errors (label count
  mismatch, duplicate registration, malformed metric definitions). They are
  never caught inside this package; instrumented code is expected to crash.
* ``SnapshotError`` signals a failed read of a series' state. Handle reads
  log it and degrade to a zero result instead of propagating.
"""
from __future__ import annotations


class MonitoringError(Exception):
    """Base class for all monitoring exceptions."""


class MetricUsageError(MonitoringError):
    """Unrecoverable misuse of the metrics API (a code defect)."""


class LabelCardinalityError(MetricUsageError):
    """Number of label values differs from the number of label names."""


class DuplicateMetricError(MetricUsageError):
    """A metric with the same final name is already registered."""


class InvalidMetricError(MetricUsageError, ValueError):
    """Metric definition rejected (empty name/help, repeated label names, bad identifiers)."""


class SnapshotError(MonitoringError):
    """Reading the current state of a series failed or returned no usable field."""


__all__ = [
    "MonitoringError",
    "MetricUsageError",
    "LabelCardinalityError",
    "DuplicateMetricError",
    "InvalidMetricError",
    "SnapshotError",
]
