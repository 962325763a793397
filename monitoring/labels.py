"""Metric definition checks and label-set resolution shared by all backends."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from .exceptions import InvalidMetricError, LabelCardinalityError


def check_definition(name: str, help: str) -> None:
    if not name:
        raise InvalidMetricError("metric name must be non-empty")
    if not help:
        raise InvalidMetricError(f"metric {name!r} requires a non-empty help string")


def normalize_label_names(label_names: Iterable[str] | None) -> tuple[str, ...]:
    """Return label names as an immutable tuple of strings.

    ``None`` and empty iterables both mean "scalar instrument". Repeated names
    are rejected since they could never be resolved positionally.
    """
    if isinstance(label_names, str):
        raise InvalidMetricError(f"label names must be a sequence, not the string {label_names!r}")
    if not label_names:
        return ()
    names = tuple(str(n) for n in label_names)
    if len(set(names)) != len(names):
        raise InvalidMetricError(f"duplicate label names in {names}")
    return names


def labels_for(names: Sequence[str], values: Sequence[str]) -> dict[str, str]:
    if len(names) != len(values):
        raise LabelCardinalityError(
            f"got {len(values)} ({tuple(values)}) values for {len(names)} labels ({tuple(names)})"
        )
    return dict(zip(names, values))


__all__ = ["check_definition", "normalize_label_names", "labels_for"]
