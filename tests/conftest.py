"""Pytest configuration for the monitoring test suite.

Responsibilities:
1. Ensure project root on sys.path.
2. Provide an isolated CollectorRegistry + Prometheus factory per test so
   metric names never collide across tests.
3. Provide an in-memory factory for backend parity tests.
"""
from __future__ import annotations

import os
import sys

import pytest
from prometheus_client import CollectorRegistry

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from monitoring.inert import InertMetricFactory  # noqa: E402
from monitoring.prometheus import MetricFactory  # noqa: E402


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def factory(registry) -> MetricFactory:
    return MetricFactory(prefix="test_", registry=registry)


@pytest.fixture
def inert_factory() -> InertMetricFactory:
    return InertMetricFactory(prefix="test_")


@pytest.fixture(params=["prometheus", "inert"])
def any_factory(request, registry):
    """Both backends, for behavior that must be identical across them."""
    if request.param == "prometheus":
        return MetricFactory(prefix="test_", registry=registry)
    return InertMetricFactory(prefix="test_")
