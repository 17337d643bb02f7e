"""Approximate matching of patterns using trigram similarity."""

from __future__ import annotations

from typing import Iterable

from ..model.match_result import MatchContext, MatchResult, MatchScore
from ..model.pattern import FunctionSignature, Pattern


def trigrams(s: str) -> list[str]:
    """Overlapping three-character windows; strings shorter than 3 yield themselves."""
    if len(s) < 3:
        return [s]
    return [s[i : i + 3] for i in range(len(s) - 2)]


def fuzzy_similarity(a: str, b: str) -> float:
    """Trigram similarity with shortcuts for exact and case-insensitive equality."""
    if a == b:
        return 1.0
    a_lower = a.lower()
    b_lower = b.lower()
    if a_lower == b_lower:
        return 0.95
    a_tri = trigrams(a_lower)
    b_tri = trigrams(b_lower)
    if not a_tri and not b_tri:
        return 1.0
    if not a_tri or not b_tri:
        return 0.0
    intersection = sum(1 for t in a_tri if t in b_tri)
    union = len(a_tri) + len(b_tri) - intersection
    if union == 0:
        return 0.0
    return intersection / union


class FuzzyMatcher:
    """Keeps patterns whose fuzzy score reaches a threshold."""

    def __init__(self, threshold: float = 0.3) -> None:
        self.threshold = threshold

    def find_matches(
        self,
        signature: FunctionSignature,
        patterns: Iterable[Pattern],
        context: MatchContext,
        limit: int,
    ) -> list[MatchResult]:
        """Patterns scoring at least the threshold, best first, at most ``limit``."""
        results = [
            MatchResult(
                pattern_id=p.id,
                pattern=p,
                score=MatchScore.from_single(self.score(p, signature)),
            )
            for p in patterns
        ]
        results = [r for r in results if r.score.combined >= self.threshold]
        results.sort(key=lambda r: r.score.combined, reverse=True)
        return results[:limit]

    def score(self, pattern: Pattern, signature: FunctionSignature) -> float:
        """Weighted name, language and parameter type similarity."""
        own = pattern.signature
        name_sim = fuzzy_similarity(own.name, signature.name)
        lang_match = 1.0 if own.language == signature.language else 0.5

        max_params = max(len(own.params), len(signature.params))
        if max_params == 0:
            param_sim = 1.0
        else:
            matching = sum(
                1
                for a, b in zip(own.params, signature.params)
                if fuzzy_similarity(a.param_type, b.param_type) > 0.6
            )
            param_sim = matching / max_params

        return name_sim * 0.5 + lang_match * 0.2 + param_sim * 0.3