"""Prometheus implementation of the monitoring MetricFactory contract."""
from __future__ import annotations

from .factory import MetricFactory
from .instruments import Counter, Gauge, Histogram

__all__ = ["MetricFactory", "Counter", "Gauge", "Histogram"]
