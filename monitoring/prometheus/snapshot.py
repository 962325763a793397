"""Point-in-time reads of a single prometheus_client series.

Uses the public ``collect()`` API instead of reading ``_value`` internals.
Only unlabeled samples are kept (``_total``, ``_count``, ``_sum``, ``_created``
or the bare gauge sample); histogram ``_bucket`` samples carry an ``le`` label
and are left to the backend.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..exceptions import SnapshotError

COUNTER_TOTAL = "_total"
GAUGE_VALUE = ""
HISTOGRAM_COUNT = "_count"
HISTOGRAM_SUM = "_sum"


@dataclass(slots=True)
class Snapshot:
    name: str
    kind: str
    values: dict[str, float] = field(default_factory=dict)

    def require(self, suffix: str) -> float:
        try:
            return self.values[suffix]
        except KeyError:
            raise SnapshotError(f"{self.kind} field {self.name}{suffix} missing") from None


def take(metric: Any) -> Snapshot:
    """Collect ``metric`` (a scalar collector or a resolved labeled child)."""
    try:
        families = list(metric.collect())
    except Exception as exc:  # noqa: BLE001 backend failure is reported, not raised past handles
        raise SnapshotError(f"failed to collect {getattr(metric, '_name', metric)!r}: {exc}") from exc
    if not families:
        raise SnapshotError(f"no metric family collected for {getattr(metric, '_name', metric)!r}")
    family = families[0]
    snap = Snapshot(name=family.name, kind=family.type)
    for sample in family.samples:
        if sample.labels:
            continue
        suffix = sample.name[len(family.name):] if sample.name.startswith(family.name) else sample.name
        snap.values[suffix] = float(sample.value)
    return snap


__all__ = [
    "Snapshot",
    "take",
    "COUNTER_TOTAL",
    "GAUGE_VALUE",
    "HISTOGRAM_COUNT",
    "HISTOGRAM_SUM",
]
