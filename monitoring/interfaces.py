"""Backend-neutral metric contracts.

Instrumented code depends only on these Protocols; concrete backends
(``monitoring.prometheus``, ``monitoring.inert``) satisfy them structurally.

Label values are passed positionally as trailing ``*label_values`` strings and
are paired with the label names given at creation time. A scalar instrument
takes no label values.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class ReadResult:
    """Outcome of a fallible read.

    ``value`` holds the zero result when ``error`` is set, so callers that
    ignore ``ok`` see the same numbers as ``Counter.value`` / ``Histogram.info``.
    """

    value: Any
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@runtime_checkable
class Counter(Protocol):
    def inc(self, *label_values: str) -> None: ...
    def add(self, val: float, *label_values: str) -> None: ...
    def value(self, *label_values: str) -> float: ...
    def read_value(self, *label_values: str) -> ReadResult: ...


@runtime_checkable
class Gauge(Protocol):
    def inc(self, *label_values: str) -> None: ...
    def dec(self, *label_values: str) -> None: ...
    def add(self, val: float, *label_values: str) -> None: ...
    def set(self, val: float, *label_values: str) -> None: ...
    def value(self, *label_values: str) -> float: ...
    def read_value(self, *label_values: str) -> ReadResult: ...


@runtime_checkable
class Histogram(Protocol):
    def observe(self, val: float, *label_values: str) -> None: ...
    def info(self, *label_values: str) -> tuple[int, float]: ...
    def read_info(self, *label_values: str) -> ReadResult: ...


@runtime_checkable
class MetricFactory(Protocol):
    def new_counter(self, name: str, help: str, label_names: Sequence[str] | None = None) -> Counter: ...
    def new_gauge(self, name: str, help: str, label_names: Sequence[str] | None = None) -> Gauge: ...
    def new_histogram(self, name: str, help: str, label_names: Sequence[str] | None = None) -> Histogram: ...


__all__ = [
    "ReadResult",
    "Counter",
    "Gauge",
    "Histogram",
    "MetricFactory",
]
