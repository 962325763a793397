from __future__ import annotations

import threading

import pytest

from monitoring import InertMetricFactory
from monitoring.exceptions import InvalidMetricError, LabelCardinalityError
from monitoring.inert import InertCounter, InertGauge


def test_prefix_and_label_names(inert_factory):
    c = inert_factory.new_counter("jobs", "jobs", ["queue"])
    assert c.name == "test_jobs"
    assert c.label_names == ("queue",)


def test_inert_counter_rejects_negative(inert_factory):
    c = inert_factory.new_counter("mono", "mono")
    with pytest.raises(ValueError):
        c.add(-2)
    assert c.value() == 0.0


def test_inert_gauge_dec_and_negative_add(inert_factory):
    g = inert_factory.new_gauge("balance", "balance", ["account"])
    g.inc("a")
    g.dec("a")
    g.dec("a")
    g.add(-1.5, "a")
    assert g.value("a") == -2.5
    assert g.value("b") == 0.0


def test_inert_histogram_per_series(inert_factory):
    h = inert_factory.new_histogram("durations", "durations", ["step"])
    h.observe(1.0, "parse")
    h.observe(2.0, "parse")
    h.observe(10.0, "write")
    assert h.info("parse") == (2, 3.0)
    assert h.info("write") == (1, 10.0)
    assert h.info("other") == (0, 0.0)


def test_inert_scalar_rejects_label_values(inert_factory):
    h = inert_factory.new_histogram("scalar_h", "scalar")
    with pytest.raises(LabelCardinalityError):
        h.observe(1.0, "x")


def test_inert_rejects_bad_definitions():
    f = InertMetricFactory()
    with pytest.raises(InvalidMetricError):
        f.new_counter("", "help")
    with pytest.raises(InvalidMetricError):
        f.new_gauge("g", "g", ["x", "x"])


def test_separate_inert_factories_are_independent():
    a, b = InertMetricFactory("p_"), InertMetricFactory("p_")
    a.new_counter("same", "same").inc()
    assert b.new_counter("same", "same").value() == 0.0


def test_inert_concurrent_updates(inert_factory):
    g = inert_factory.new_gauge("conc", "conc")
    h = inert_factory.new_histogram("conc_h", "conc")

    def work() -> None:
        for _ in range(1000):
            g.inc()
            h.observe(1.0)

    threads = [threading.Thread(target=work) for _ in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert g.value() == 6000.0
    assert h.info() == (6000, 6000.0)


def test_inert_gauge_is_not_a_counter(inert_factory):
    g = inert_factory.new_gauge("kinds", "kinds")
    assert not isinstance(g, InertCounter)
    assert not isinstance(inert_factory.new_counter("kinds_c", "kinds"), InertGauge)
