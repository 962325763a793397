"""prometheus_client-backed metric handles.

Each handle owns exactly one storage variant, fixed at creation:

* ``Scalar``  - a single unlabeled collector (one series).
* ``Labeled`` - a labeled collector plus its ordered label names; series are
  materialized lazily by ``labels(...)`` on first use of a value combination.

Mutations delegate straight to the client, which synchronizes each series
internally. Reads go through ``snapshot.take``; a failed read is logged and
turned into a zero result, while label count mismatches always raise.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..exceptions import SnapshotError
from ..interfaces import ReadResult
from ..labels import labels_for
from . import snapshot as _snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Scalar:
    metric: Any

    def resolve(self, label_values: Sequence[str]) -> Any:
        labels_for((), label_values)
        return self.metric


@dataclass(frozen=True, slots=True)
class Labeled:
    vector: Any
    label_names: tuple[str, ...]

    def resolve(self, label_values: Sequence[str]) -> Any:
        labels_for(self.label_names, label_values)
        return self.vector.labels(*label_values)


Storage = Scalar | Labeled


class _Handle:
    kind = "metric"

    __slots__ = ("name", "_storage")

    def __init__(self, name: str, storage: Storage):
        self.name = name
        self._storage = storage

    @property
    def label_names(self) -> tuple[str, ...]:
        if isinstance(self._storage, Labeled):
            return self._storage.label_names
        return ()

    def _series(self, label_values: Sequence[str]) -> Any:
        return self._storage.resolve(label_values)

    def _read(self, label_values: Sequence[str], *suffixes: str) -> tuple[float, ...]:
        series = self._series(label_values)
        try:
            snap = _snapshot.take(series)
            return tuple(snap.require(s) for s in suffixes)
        except SnapshotError as exc:
            logger.error("failed to read %s %s%s: %s", self.kind, self.name, _fmt(label_values), exc,
                         exc_info=exc)
            raise

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, label_names={self.label_names!r})"


def _fmt(label_values: Sequence[str]) -> str:
    return "{" + ",".join(map(str, label_values)) + "}" if label_values else ""


class Counter(_Handle):
    """Wrapper around a prometheus_client Counter (scalar or labeled)."""

    kind = "counter"
    __slots__ = ()

    def inc(self, *label_values: str) -> None:
        self._series(label_values).inc()

    def add(self, val: float, *label_values: str) -> None:
        self._series(label_values).inc(val)

    def read_value(self, *label_values: str) -> ReadResult:
        try:
            (total,) = self._read(label_values, _snapshot.COUNTER_TOTAL)
        except SnapshotError as exc:
            return ReadResult(0.0, exc)
        return ReadResult(total)

    def value(self, *label_values: str) -> float:
        return self.read_value(*label_values).value


class Gauge(_Handle):
    """Wrapper around a prometheus_client Gauge (scalar or labeled)."""

    kind = "gauge"
    __slots__ = ()

    def inc(self, *label_values: str) -> None:
        self._series(label_values).inc()

    def dec(self, *label_values: str) -> None:
        self._series(label_values).dec()

    def add(self, val: float, *label_values: str) -> None:
        self._series(label_values).inc(val)

    def set(self, val: float, *label_values: str) -> None:
        self._series(label_values).set(val)

    def read_value(self, *label_values: str) -> ReadResult:
        try:
            (current,) = self._read(label_values, _snapshot.GAUGE_VALUE)
        except SnapshotError as exc:
            return ReadResult(0.0, exc)
        return ReadResult(current)

    def value(self, *label_values: str) -> float:
        return self.read_value(*label_values).value


class Histogram(_Handle):
    """Wrapper around a prometheus_client Histogram (scalar or labeled).

    Bucket boundaries are the client defaults; only count and sum are read back.
    """

    kind = "histogram"
    __slots__ = ()

    def observe(self, val: float, *label_values: str) -> None:
        self._series(label_values).observe(val)

    def read_info(self, *label_values: str) -> ReadResult:
        try:
            count, total = self._read(label_values, _snapshot.HISTOGRAM_COUNT, _snapshot.HISTOGRAM_SUM)
        except SnapshotError as exc:
            return ReadResult((0, 0.0), exc)
        return ReadResult((int(count), total))

    def info(self, *label_values: str) -> tuple[int, float]:
        return self.read_info(*label_values).value


__all__ = ["Scalar", "Labeled", "Storage", "Counter", "Gauge", "Histogram"]
