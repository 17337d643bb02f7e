import pytest

from agentic_evolve.cache.metrics import CacheMetrics


def test_new_metrics_are_zero():
    m = CacheMetrics()
    assert m.hit_count() == 0
    assert m.miss_count() == 0
    assert m.eviction_count() == 0
    assert m.current_size() == 0


def test_hit_rate_empty_is_zero():
    assert CacheMetrics().hit_rate() == 0.0


def test_hit_rate_all_hits():
    m = CacheMetrics()
    m.record_hit()
    m.record_hit()
    assert m.hit_rate() == 1.0


def test_hit_rate_mixed():
    m = CacheMetrics()
    m.record_hit()
    m.record_miss()
    assert m.hit_rate() == pytest.approx(0.5)


def test_eviction_count_tracks():
    m = CacheMetrics()
    m.record_eviction()
    m.record_eviction()
    assert m.eviction_count() == 2


def test_set_size_works():
    m = CacheMetrics()
    m.set_size(42)
    assert m.current_size() == 42


def test_snapshot_captures_state():
    m = CacheMetrics()
    m.record_hit()
    m.record_miss()
    m.set_size(10)
    snap = m.snapshot()
    assert snap.hit_count == 1
    assert snap.miss_count == 1
    assert snap.current_size == 10
    assert snap.hit_rate == pytest.approx(0.5)


def test_snapshot_is_not_updated_later():
    m = CacheMetrics()
    snap = m.snapshot()
    m.record_hit()
    assert snap.hit_count == 0
    assert m.hit_count() == 1