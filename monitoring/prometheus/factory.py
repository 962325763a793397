"""MetricFactory backed by prometheus_client.

Creates Counter/Gauge/Histogram collectors, registers them synchronously with
the factory's ``CollectorRegistry`` and hands back wrapper handles exposing the
backend-neutral contract from ``monitoring.interfaces``.

The registry is injected (default: the process-wide ``prometheus_client.REGISTRY``)
so tests can build isolated factories:

    from prometheus_client import CollectorRegistry
    from monitoring.prometheus import MetricFactory

    factory = MetricFactory(prefix="app_", registry=CollectorRegistry())
    requests = factory.new_counter("requests_total", "Requests served", ["method"])
    requests.inc("GET")

Registering two collectors under the same final name raises
``DuplicateMetricError``; it is never retried or recovered.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import prometheus_client
from prometheus_client import CollectorRegistry

from ..exceptions import DuplicateMetricError, InvalidMetricError
from ..labels import check_definition, normalize_label_names
from ..settings import MetricsSettings
from .instruments import Counter, Gauge, Histogram, Labeled, Scalar, Storage

logger = logging.getLogger(__name__)


class MetricFactory:
    """Creates Prometheus-backed metrics whose names share ``prefix``."""

    def __init__(self, prefix: str = "", registry: CollectorRegistry | None = None):
        self.prefix = prefix
        self.registry = registry if registry is not None else prometheus_client.REGISTRY

    @classmethod
    def from_env(cls, registry: CollectorRegistry | None = None,
                 env: Mapping[str, str] | None = None) -> MetricFactory:
        settings = MetricsSettings.from_env(env)
        return cls(prefix=settings.prefix, registry=registry)

    def new_counter(self, name: str, help: str, label_names: Sequence[str] | None = None) -> Counter:
        """Create and register a counter; scalar when ``label_names`` is empty."""
        full_name, storage = self._register("counter", prometheus_client.Counter, name, help, label_names)
        return Counter(full_name, storage)

    def new_gauge(self, name: str, help: str, label_names: Sequence[str] | None = None) -> Gauge:
        """Create and register a gauge; scalar when ``label_names`` is empty."""
        full_name, storage = self._register("gauge", prometheus_client.Gauge, name, help, label_names)
        return Gauge(full_name, storage)

    def new_histogram(self, name: str, help: str, label_names: Sequence[str] | None = None) -> Histogram:
        """Create and register a histogram with the client's default buckets."""
        full_name, storage = self._register("histogram", prometheus_client.Histogram, name, help, label_names)
        return Histogram(full_name, storage)

    def _register(self, kind: str, ctor: Callable[..., Any], name: str, help: str,
                  label_names: Sequence[str] | None) -> tuple[str, Storage]:
        check_definition(name, help)
        names = normalize_label_names(label_names)
        full_name = self.prefix + name
        try:
            if names:
                collector = ctor(full_name, help, names, registry=None)
            else:
                collector = ctor(full_name, help, registry=None)
        except ValueError as exc:
            raise InvalidMetricError(f"invalid {kind} {full_name!r}: {exc}") from exc
        try:
            self.registry.register(collector)
        except ValueError as exc:
            raise DuplicateMetricError(f"{kind} {full_name!r} already registered: {exc}") from exc
        logger.debug("registered %s %s labels=%s", kind, full_name, list(names))
        if names:
            return full_name, Labeled(collector, names)
        return full_name, Scalar(collector)

    def __repr__(self) -> str:
        return f"MetricFactory(prefix={self.prefix!r})"


__all__ = ["MetricFactory"]
