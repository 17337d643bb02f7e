import pytest

from agentic_evolve.model.match_result import MatchContext, MatchResult, MatchScore
from agentic_evolve.model.pattern import FunctionSignature, Language, Pattern


def test_combine_weights_sum_to_one():
    assert MatchScore.combine(1.0, 1.0, 1.0, 1.0).combined == pytest.approx(1.0)


def test_combine_signature_weight():
    score = MatchScore.combine(1.0, 0.0, 0.0, 0.0)
    assert score.combined == pytest.approx(0.4)
    assert score.signature_score == 1.0


def test_combine_is_monotone():
    low = MatchScore.combine(0.2, 0.3, 0.4, 0.5)
    high = MatchScore.combine(0.3, 0.3, 0.4, 0.5)
    assert high.combined > low.combined


def test_from_single_sets_every_component():
    s = MatchScore.from_single(0.7)
    assert {
        s.signature_score,
        s.context_score,
        s.semantic_score,
        s.confidence_score,
        s.combined,
    } == {0.7}


def test_context_defaults():
    ctx = MatchContext()
    assert ctx.max_results == 10
    assert ctx.domain is None
    assert ctx.imports == ()


def test_context_builders_return_new_context():
    base = MatchContext()
    ctx = base.with_domain("web").with_surrounding_code("let x").with_max_results(3)
    assert (ctx.domain, ctx.surrounding_code, ctx.max_results) == ("web", "let x", 3)
    assert base.domain is None
    assert base.max_results == 10


def test_match_result_default_bindings_are_independent():
    sig = FunctionSignature("f", Language.RUST)
    p = Pattern.create("f", "d", Language.RUST, sig, "t", [], 0.5)
    a = MatchResult(p.id, p, MatchScore.from_single(0.5))
    b = MatchResult(p.id, p, MatchScore.from_single(0.5))
    a.suggested_bindings["k"] = "v"
    assert b.suggested_bindings == {}