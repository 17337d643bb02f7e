import json

import pytest

from agentic_evolve.model.errors import PatternNotFound
from agentic_evolve.model.pattern import FunctionSignature, Language, Pattern
from agentic_evolve.storage.versioner import PatternVersioner


def make_pattern(name="p"):
    sig = FunctionSignature(name, Language.GO)
    return Pattern.create(name, "web", Language.GO, sig, "body", [], 0.7)


def test_record_version_returns_pattern_version():
    versioner = PatternVersioner()
    p = make_pattern()
    assert versioner.record_version(p, "initial") == p.version


def test_history_in_recording_order():
    versioner = PatternVersioner()
    p = make_pattern()
    versioner.record_version(p, "first")
    p.version += 1
    versioner.record_version(p, "second")
    history = versioner.get_history(str(p.id))
    assert [e.change_description for e in history] == ["first", "second"]
    assert versioner.latest_version(str(p.id)) == p.version


def test_snapshot_round_trips():
    versioner = PatternVersioner()
    p = make_pattern()
    versioner.record_version(p, "initial")
    entry = versioner.get_version(str(p.id), p.version)
    assert Pattern.from_dict(json.loads(entry.pattern_snapshot)) == p


def test_snapshot_is_frozen_at_record_time():
    versioner = PatternVersioner()
    p = make_pattern()
    versioner.record_version(p, "initial")
    original_version = p.version
    p.template = "changed"
    p.version += 1
    snapshot = json.loads(versioner.get_version(str(p.id), original_version).pattern_snapshot)
    assert snapshot["template"] == "body"


def test_get_version_unknown_pattern_raises():
    versioner = PatternVersioner()
    with pytest.raises(PatternNotFound) as info:
        versioner.get_version("missing", 1)
    assert info.value.detail == "missing"


def test_get_version_unknown_version_raises():
    versioner = PatternVersioner()
    p = make_pattern()
    versioner.record_version(p, "initial")
    with pytest.raises(PatternNotFound) as info:
        versioner.get_version(str(p.id), p.version + 1)
    assert info.value.detail == f"{p.id}@v{p.version + 1}"


def test_unknown_pattern_has_no_history():
    versioner = PatternVersioner()
    assert versioner.get_history("none") == []
    assert versioner.latest_version("none") is None


def test_total_versions_and_clear():
    versioner = PatternVersioner()
    a, b = make_pattern("a"), make_pattern("b")
    versioner.record_version(a, "x")
    versioner.record_version(a, "y")
    versioner.record_version(b, "z")
    assert versioner.total_versions() == 3
    versioner.clear()
    assert versioner.total_versions() == 0
    assert versioner.get_history(str(a.id)) == []