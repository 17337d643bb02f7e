import pytest

from agentic_evolve.matching.signature import (
    SignatureMatcher,
    levenshtein_distance,
    string_similarity,
)
from agentic_evolve.model.match_result import MatchContext
from agentic_evolve.model.pattern import (
    FunctionSignature,
    Language,
    ParamSignature,
    Pattern,
)


def make_pattern(name, *, language=Language.RUST, params=(), return_type=None, is_async=False):
    sig = FunctionSignature(
        name=name,
        language=language,
        params=list(params),
        return_type=return_type,
        is_async=is_async,
    )
    return Pattern.create(name, "web", language, sig, "body", [], 0.8)


def make_sig(name, *, language=Language.RUST, params=(), return_type=None, is_async=False):
    return FunctionSignature(
        name=name,
        language=language,
        params=list(params),
        return_type=return_type,
        is_async=is_async,
    )


def test_levenshtein_known_value():
    assert levenshtein_distance("kitten", "sitting") == 3


@pytest.mark.parametrize("a,b", [("abc", "abd"), ("", "xyz"), ("flaw", "lawn")])
def test_levenshtein_symmetric_and_zero_on_self(a, b):
    assert levenshtein_distance(a, b) == levenshtein_distance(b, a)
    assert levenshtein_distance(a, a) == 0


def test_levenshtein_against_empty_is_length():
    assert levenshtein_distance("", "abc") == len("abc")


def test_string_similarity_exact_case_and_substring():
    assert string_similarity("parse", "parse") == 1.0
    assert string_similarity("Parse", "parse") == 0.95
    assert string_similarity("fetch", "fetch_user") == 0.7


def test_string_similarity_in_range():
    value = string_similarity("alpha", "omega")
    assert 0.0 <= value < 0.7


def test_identical_signature_scores_highest():
    matcher = SignatureMatcher()
    pattern = make_pattern("load_config", return_type="Config")
    same = matcher.score_match(pattern, make_sig("load_config", return_type="Config"))
    other = matcher.score_match(
        pattern, make_sig("render", language=Language.PYTHON, is_async=True)
    )
    assert same > other
    assert 0.0 <= other <= same <= 1.0


def test_language_mismatch_lowers_score():
    matcher = SignatureMatcher()
    pattern = make_pattern("run")
    rust = matcher.score_match(pattern, make_sig("run"))
    python = matcher.score_match(pattern, make_sig("run", language=Language.PYTHON))
    assert python < rust


def test_param_types_contribute():
    matcher = SignatureMatcher()
    pattern = make_pattern("f", params=[ParamSignature("x", "u32")])
    close = matcher.score_match(pattern, make_sig("f", params=[ParamSignature("y", "u32")]))
    far = matcher.score_match(pattern, make_sig("f", params=[ParamSignature("y", "Vec<String>")]))
    assert close > far


def test_find_matches_sorted_and_limited():
    matcher = SignatureMatcher()
    patterns = [make_pattern("zzz_other"), make_pattern("load_user"), make_pattern("load_users")]
    results = matcher.find_matches(make_sig("load_user"), patterns, MatchContext(), 2)
    assert len(results) == 2
    assert results[0].pattern.name == "load_user"
    assert results[0].score.combined >= results[1].score.combined
    assert results[0].pattern_id == results[0].pattern.id