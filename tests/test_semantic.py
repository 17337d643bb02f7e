import pytest

from agentic_evolve.matching.semantic import SemanticMatcher, is_semantic_match, tokenize_name
from agentic_evolve.model.match_result import MatchContext
from agentic_evolve.model.pattern import FunctionSignature, Language, Pattern


def make_pattern(name):
    sig = FunctionSignature(name=name, language=Language.RUST)
    return Pattern.create(name, "web", Language.RUST, sig, "body", [], 0.8)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("getUserName", ["get", "user", "name"]),
        ("fetch_user.data", ["fetch", "user", "data"]),
        ("save-item now", ["save", "item", "now"]),
        ("", []),
    ],
)
def test_tokenize_name(name, expected):
    assert tokenize_name(name) == expected


def test_synonyms_match_within_group():
    assert is_semantic_match("get", "fetch")
    assert is_semantic_match("serialize", "encode")


def test_synonyms_do_not_cross_groups():
    assert not is_semantic_match("get", "save")
    assert not is_semantic_match("unknown", "get")


def test_synonym_names_score_fully():
    sig = FunctionSignature("fetch_user", Language.RUST)
    results = SemanticMatcher().find_matches(sig, [make_pattern("get_user")], MatchContext(), 5)
    assert len(results) == 1
    assert results[0].score.combined == 1.0


def test_unrelated_names_are_excluded():
    sig = FunctionSignature("fetch_user", Language.RUST)
    results = SemanticMatcher().find_matches(
        sig, [make_pattern("delete_item")], MatchContext(), 5
    )
    assert results == []


def test_results_ordered_and_limited():
    sig = FunctionSignature("load_user_profile", Language.RUST)
    patterns = [make_pattern("load_item"), make_pattern("read_user_profile"), make_pattern("x")]
    results = SemanticMatcher().find_matches(sig, patterns, MatchContext(), 1)
    assert [r.pattern.name for r in results] == ["read_user_profile"]