"""Matching patterns by the meaning of their names."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..model.match_result import MatchContext, MatchResult, MatchScore
from ..model.pattern import FunctionSignature, Pattern

_SEPARATORS = frozenset("_-. ")

_SYNONYMS: tuple[frozenset[str], ...] = (
    frozenset({"get", "fetch", "retrieve", "read", "load", "find", "query"}),
    frozenset({"set", "put", "write", "store", "save", "update"}),
    frozenset({"delete", "remove", "drop", "destroy", "clear"}),
    frozenset({"create", "new", "build", "make", "init", "construct"}),
    frozenset({"list", "all", "enumerate", "iter"}),
    frozenset({"check", "validate", "verify", "test", "is", "has"}),
    frozenset({"parse", "decode", "deserialize", "from"}),
    frozenset({"format", "encode", "serialize", "to"}),
    frozenset({"send", "emit", "dispatch", "publish", "notify"}),
    frozenset({"receive", "handle", "process", "consume", "subscribe"}),
)


def tokenize_name(name: str) -> list[str]:
    """Split a snake, kebab, dotted or camel-case name into lower-case words."""
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


def is_semantic_match(a: str, b: str) -> bool:
    """True when both words belong to the same synonym group."""
    return any(a in group and b in group for group in _SYNONYMS)


class SemanticMatcher:
    """Scores patterns by shared or synonymous words in their names."""

    def find_matches(
        self,
        signature: FunctionSignature,
        patterns: Iterable[Pattern],
        context: MatchContext,
        limit: int,
    ) -> list[MatchResult]:
        """Patterns with a positive semantic score, best first, at most ``limit``."""
        query_tokens = tokenize_name(signature.name)
        results = [
            MatchResult(
                pattern_id=p.id,
                pattern=p,
                score=MatchScore.from_single(self._score(p, query_tokens)),
            )
            for p in patterns
        ]
        results = [r for r in results if r.score.combined > 0.0]
        results.sort(key=lambda r: r.score.combined, reverse=True)
        return results[:limit]

    @staticmethod
    def _score(pattern: Pattern, query_tokens: Sequence[str]) -> float:
        pattern_tokens = tokenize_name(pattern.name)
        if not query_tokens or not pattern_tokens:
            return 0.0
        matches = sum(
            1
            for qt in query_tokens
            if any(pt == qt or is_semantic_match(pt, qt) for pt in pattern_tokens)
        )
        return matches / max(len(query_tokens), len(pattern_tokens))