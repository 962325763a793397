"""Testing helpers for metrics isolation.

Provides:
  - isolated_factory(): a Prometheus MetricFactory bound to a fresh CollectorRegistry
  - purge_default_registry(): unregister collectors from prometheus_client.REGISTRY by name prefix

Use in pytest fixtures so tests never collide on the process-wide registry.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import prometheus_client
from prometheus_client import CollectorRegistry

from .prometheus import MetricFactory

logger = logging.getLogger(__name__)


def purge_default_registry(prefix: str = "") -> int:
    """Unregister collectors whose names start with ``prefix`` from the default registry.

    Relies on the client's private collector map; there is no public enumeration
    API. Returns the number of collectors removed.
    """
    names_map = getattr(prometheus_client.REGISTRY, "_collector_to_names", {})
    removed = 0
    for collector, names in list(names_map.items()):
        if any(n.startswith(prefix) for n in names):
            prometheus_client.REGISTRY.unregister(collector)
            removed += 1
    logger.debug("purged %d collectors (prefix=%r) from default registry", removed, prefix)
    return removed


@contextmanager
def isolated_factory(prefix: str = "") -> Iterator[MetricFactory]:
    yield MetricFactory(prefix=prefix, registry=CollectorRegistry())


__all__ = ["purge_default_registry", "isolated_factory"]
