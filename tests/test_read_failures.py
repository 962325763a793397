"""Read failures degrade to zero results and are logged, never raised."""
from __future__ import annotations

import logging

import pytest

from monitoring.exceptions import LabelCardinalityError, SnapshotError
from monitoring.prometheus import snapshot

INSTRUMENTS_LOGGER = "monitoring.prometheus.instruments"


def _boom():
    raise RuntimeError("backend exploded")


def test_counter_collect_failure_returns_zero_and_logs(factory, monkeypatch, caplog):
    c = factory.new_counter("fragile", "fragile")
    c.add(4)
    monkeypatch.setattr(c._storage.metric, "collect", _boom)
    with caplog.at_level(logging.ERROR, logger=INSTRUMENTS_LOGGER):
        assert c.value() == 0.0
    assert any("failed to read counter test_fragile" in r.getMessage() for r in caplog.records)


def test_read_value_exposes_failure_cause(factory, monkeypatch):
    g = factory.new_gauge("fragile_gauge", "fragile")
    g.set(9)
    monkeypatch.setattr(g._storage.metric, "collect", _boom)
    res = g.read_value()
    assert not res.ok
    assert res.value == 0.0
    assert isinstance(res.error, SnapshotError)
    assert isinstance(res.error.__cause__, RuntimeError)


def test_missing_field_returns_zero(factory, monkeypatch, caplog):
    c = factory.new_counter("hollow", "hollow", ["k"])
    c.inc("v")
    monkeypatch.setattr(snapshot, "take", lambda metric: snapshot.Snapshot(name="test_hollow", kind="counter"))
    with caplog.at_level(logging.ERROR, logger=INSTRUMENTS_LOGGER):
        assert c.value("v") == 0.0
    assert any("field test_hollow_total missing" in r.getMessage() for r in caplog.records)


def test_histogram_failure_returns_zero_pair(factory, monkeypatch, caplog):
    h = factory.new_histogram("fragile_hist", "fragile", ["route"])
    h.observe(2.0, "/x")
    monkeypatch.setattr(snapshot, "take", lambda metric: snapshot.Snapshot(name="test_fragile_hist", kind="histogram"))
    with caplog.at_level(logging.ERROR, logger=INSTRUMENTS_LOGGER):
        assert h.info("/x") == (0, 0.0)
        res = h.read_info("/x")
    assert not res.ok
    assert res.value == (0, 0.0)
    assert caplog.records


def test_label_mismatch_still_raises_when_reads_fail(factory, monkeypatch):
    c = factory.new_counter("strict", "strict", ["a"])
    monkeypatch.setattr(snapshot, "take", lambda metric: pytest.fail("should not read"))
    with pytest.raises(LabelCardinalityError):
        c.value()


def test_collect_failure_logged_with_traceback(factory, monkeypatch, caplog):
    c = factory.new_counter("traced", "traced")
    monkeypatch.setattr(c._storage.metric, "collect", _boom)
    with caplog.at_level(logging.ERROR, logger=INSTRUMENTS_LOGGER):
        c.value()
    (record,) = [r for r in caplog.records if r.name == INSTRUMENTS_LOGGER]
    assert record.exc_info is not None
    assert record.exc_info[0] is SnapshotError
    assert "backend exploded" in caplog.text
