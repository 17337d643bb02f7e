"""Combining signature, context and name scores into one ranking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..model.match_result import MatchContext, MatchResult, MatchScore
from ..model.pattern import FunctionSignature, Pattern
from .context import ContextMatcher
from .signature import SignatureMatcher

_MIN_COMBINED = 0.1
_SEPARATORS = frozenset("_- ")


@dataclass
class MatchWeights:
    """Weights for the signature, context, semantic and confidence components."""

    signature: float = 0.4
    context: float = 0.2
    semantic: float = 0.25
    fuzzy: float = 0.15


def _tokenize(name: str) -> list[str]:
    tokens: list[str] = []
    current = ""
    for ch in name:
        if ch in _SEPARATORS:
            if current:
                tokens.append(current.lower())
                current = ""
        elif ch.isupper() and current:
            tokens.append(current.lower())
            current = ch
        else:
            current += ch
    if current:
        tokens.append(current.lower())
    return tokens


def _token_overlap(a: list[str], b: list[str]) -> float:
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return sum(1 for t in a if t in b) / max_len


class CompositeMatcher:
    """Ranks patterns by a weighted blend of several matchers and pattern confidence."""

    def __init__(self, weights: MatchWeights | None = None) -> None:
        self.weights = weights if weights is not None else MatchWeights()
        self._signature = SignatureMatcher()
        self._context = ContextMatcher()

    def find_matches(
        self,
        signature: FunctionSignature,
        patterns: Iterable[Pattern],
        context: MatchContext,
        limit: int,
    ) -> list[MatchResult]:
        """Best matches first, at most ``limit``; one result per pattern id.

        The weighted blend becomes the confidence component of the score, and
        results whose combined score does not exceed 0.1 are dropped.
        """
        query_tokens = _tokenize(signature.name)
        by_id: dict[str, MatchResult] = {}
        w = self.weights
        for pattern in patterns:
            sig = self._signature.score_match(pattern, signature)
            ctx = self._context.score_context(pattern, context)
            sem = _token_overlap(query_tokens, _tokenize(pattern.name))
            blended = (
                sig * w.signature
                + ctx * w.context
                + sem * w.semantic
                + pattern.confidence * w.fuzzy
            )
            by_id[str(pattern.id)] = MatchResult(
                pattern_id=pattern.id,
                pattern=pattern,
                score=MatchScore.combine(sig, ctx, sem, blended),
            )

        results = [r for r in by_id.values() if r.score.combined > _MIN_COMBINED]
        results.sort(key=lambda r: r.score.combined, reverse=True)
        return results[:limit]