"""Matching patterns by function signature similarity."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..model.match_result import MatchContext, MatchResult, MatchScore
from ..model.pattern import FunctionSignature, ParamSignature, Pattern


def levenshtein_distance(a: str, b: str) -> int:
    """Number of single-character edits turning ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def string_similarity(a: str, b: str) -> float:
    """Similarity in ``[0, 1]``: exact, case-insensitive, substring, then edit distance."""
    if a == b:
        return 1.0
    a_lower = a.lower()
    b_lower = b.lower()
    if a_lower == b_lower:
        return 0.95
    if b_lower in a_lower or a_lower in b_lower:
        return 0.7
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a_lower, b_lower) / max_len


def _param_type_similarity(
    a_params: Sequence[ParamSignature], b_params: Sequence[ParamSignature]
) -> float:
    max_len = max(len(a_params), len(b_params))
    if max_len == 0:
        return 1.0
    total = sum(
        string_similarity(a.param_type, b.param_type) for a, b in zip(a_params, b_params)
    )
    return total / max_len


class SignatureMatcher:
    """Scores patterns by how closely their signature resembles a query signature."""

    def find_matches(
        self,
        signature: FunctionSignature,
        patterns: Iterable[Pattern],
        context: MatchContext,
        limit: int,
    ) -> list[MatchResult]:
        """Patterns with a positive score, best first, at most ``limit``."""
        results = [
            MatchResult(
                pattern_id=p.id,
                pattern=p,
                score=MatchScore.from_single(self.score_match(p, signature)),
            )
            for p in patterns
        ]
        results = [r for r in results if r.score.combined > 0.0]
        results.sort(key=lambda r: r.score.combined, reverse=True)
        return results[:limit]

    def score_match(self, pattern: Pattern, signature: FunctionSignature) -> float:
        """Average of name, language, arity, return type, async and parameter type scores."""
        own = pattern.signature
        factors = []

        factors.append(string_similarity(own.name, signature.name))
        factors.append(1.0 if own.language == signature.language else 0.0)

        param_diff = abs(len(own.params) - len(signature.params))
        factors.append(1.0 if param_diff == 0 else 1.0 / (1.0 + param_diff))

        if own.return_type == signature.return_type:
            factors.append(1.0)
        elif own.return_type is not None and signature.return_type is not None:
            factors.append(string_similarity(own.return_type, signature.return_type))
        else:
            factors.append(0.0)

        factors.append(0.5 if own.is_async == signature.is_async else 0.0)
        factors.append(_param_type_similarity(own.params, signature.params))

        return sum(factors) / len(factors)