import pytest

from agentic_evolve.composition.composer import PatternComposer
from agentic_evolve.model.errors import CompositionError
from agentic_evolve.model.pattern import FunctionSignature, Language, Pattern


def make_pattern(template, name="p"):
    sig = FunctionSignature(name=name, language=Language.RUST)
    return Pattern.create(name, "web", Language.RUST, sig, template, [], 0.8)


def test_empty_raises():
    with pytest.raises(CompositionError):
        PatternComposer().compose([], {})


def test_binds_placeholder():
    p = make_pattern("fn {{name}}() {}")
    result = PatternComposer().compose([p], {"name": "go"})
    assert result.code == "fn go() {}"
    assert result.gaps == []
    assert result.patterns_used == [str(p.id)]
    assert result.coverage == pytest.approx(1.0)


def test_no_placeholders_full_coverage():
    p = make_pattern("plain code")
    result = PatternComposer().compose([p], {})
    assert result.code == "plain code"
    assert result.coverage == pytest.approx(1.0)


def test_unbound_placeholder_is_gap():
    p = make_pattern("let a = {{x}};")
    result = PatternComposer().compose([p], {"y": "1"})
    assert result.gaps == ["x"]
    assert result.coverage == 0.0
    assert "{{x}}" in result.code


def test_joins_with_blank_line():
    a = make_pattern("first")
    b = make_pattern("second")
    result = PatternComposer().compose([a, b], {})
    assert result.code == "first\n\nsecond"
    assert result.patterns_used == [str(a.id), str(b.id)]


def test_order_reverses_and_skips_invalid():
    a = make_pattern("first")
    b = make_pattern("second")
    result = PatternComposer().compose([a, b], {}, order=[1, 7, 0])
    assert result.code == "second\n\nfirst"
    assert result.patterns_used == [str(b.id), str(a.id)]


def test_coverage_stays_in_unit_interval():
    a = make_pattern("{{a}} {{b}}")
    b = make_pattern("{{a}}")
    result = PatternComposer().compose([a, b], {"a": "x"})
    assert 0.0 <= result.coverage <= 1.0
    assert result.gaps == ["b"]