import time

import pytest

from agentic_evolve.collective.decay import DecayConfig, DecayManager
from agentic_evolve.model.pattern import FunctionSignature, Language, Pattern

DAY = 86400


def make_pattern(confidence=0.8, days_ago=0, usage=0):
    sig = FunctionSignature(name="p", language=Language.RUST)
    p = Pattern.create("p", "web", Language.RUST, sig, "t", [], confidence)
    p.last_used = int(time.time()) - days_ago * DAY
    p.usage_count = usage
    return p


def test_recent_use_has_no_decay():
    p = make_pattern(confidence=0.8, days_ago=-1)
    assert DecayManager().apply_decay(p) == 0.8
    assert p.confidence == 0.8


def test_one_half_life_halves_confidence():
    p = make_pattern(confidence=0.8, days_ago=30)
    assert DecayManager().apply_decay(p) == pytest.approx(0.4, rel=1e-3)


def test_decay_floors_at_min_confidence():
    p = make_pattern(confidence=0.8, days_ago=1000)
    manager = DecayManager()
    assert manager.apply_decay(p) == manager.config.min_confidence


def test_decay_never_increases():
    p = make_pattern(confidence=0.6, days_ago=5)
    assert DecayManager().apply_decay(p) < 0.6


def test_usage_boost_success_beats_failure():
    manager = DecayManager()
    a = make_pattern(confidence=0.5)
    b = make_pattern(confidence=0.5)
    assert manager.apply_usage_boost(a, True) > manager.apply_usage_boost(b, False) > 0.5


def test_usage_boost_capped():
    p = make_pattern(confidence=0.99)
    assert DecayManager().apply_usage_boost(p, True) == 1.0


def test_should_prune():
    manager = DecayManager()
    assert manager.should_prune(make_pattern(confidence=0.1, days_ago=100)) is True
    assert manager.should_prune(make_pattern(confidence=0.1, days_ago=100, usage=3)) is False
    assert manager.should_prune(make_pattern(confidence=0.1, days_ago=10)) is False
    assert manager.should_prune(make_pattern(confidence=0.5, days_ago=100)) is False


def test_custom_config_threshold():
    manager = DecayManager(DecayConfig(min_confidence=0.3))
    assert manager.should_prune(make_pattern(confidence=0.3, days_ago=100)) is True


def test_decay_report():
    patterns = [
        make_pattern(confidence=0.9),
        make_pattern(confidence=0.5),
        make_pattern(confidence=0.1, days_ago=100),
    ]
    report = DecayManager().decay_report(patterns)
    assert report.total == 3
    assert (report.healthy, report.decaying, report.critical) == (1, 1, 1)
    assert report.prunable == 1