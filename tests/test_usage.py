from agentic_evolve.collective.usage import UsageTracker


def test_record_use_accumulates():
    t = UsageTracker()
    t.record_use("p", "web", True)
    t.record_use("p", "web", False)
    t.record_use("p", "cli", True)
    rec = t.get_usage("p")
    assert rec.total_uses == 3
    assert rec.successful_uses == 2
    assert rec.failed_uses == 1
    assert rec.domains == {"web": 2, "cli": 1}
    assert rec.first_used <= rec.last_used


def test_unknown_pattern():
    t = UsageTracker()
    assert t.get_usage("nope") is None
    assert t.success_rate("nope") == 0.0


def test_success_rate():
    t = UsageTracker()
    t.record_use("p", "web", True)
    t.record_use("p", "web", False)
    assert t.success_rate("p") == 0.5


def test_most_and_least_used():
    t = UsageTracker()
    for _ in range(3):
        t.record_use("busy", "web", True)
    t.record_use("quiet", "web", True)
    t.record_use("mid", "web", True)
    t.record_use("mid", "web", True)
    assert [pid for pid, _ in t.most_used(10)] == ["busy", "mid", "quiet"]
    assert [pid for pid, _ in t.least_used(2)] == ["quiet", "mid"]
    assert t.most_used(1)[0][1].total_uses == 3


def test_total_and_clear():
    t = UsageTracker()
    t.record_use("a", "web", True)
    t.record_use("b", "web", True)
    assert t.total_patterns_tracked() == 2
    t.clear()
    assert t.total_patterns_tracked() == 0
    assert t.most_used(5) == []