"""Matching patterns by the code context around the request."""

from __future__ import annotations

from typing import Iterable

from ..model.match_result import MatchContext, MatchResult, MatchScore
from ..model.pattern import FunctionSignature, Pattern

_NO_CONTEXT_SCORE = 0.3


class ContextMatcher:
    """Scores patterns by domain, imports and surrounding code."""

    def find_matches(
        self,
        signature: FunctionSignature,
        patterns: Iterable[Pattern],
        context: MatchContext,
        limit: int,
    ) -> list[MatchResult]:
        """Patterns with a positive context score, best first, at most ``limit``."""
        results = [
            MatchResult(
                pattern_id=p.id,
                pattern=p,
                score=MatchScore.from_single(self.score_context(p, context)),
            )
            for p in patterns
        ]
        results = [r for r in results if r.score.combined > 0.0]
        results.sort(key=lambda r: r.score.combined, reverse=True)
        return results[:limit]

    def score_context(self, pattern: Pattern, context: MatchContext) -> float:
        """Average of the context factors present; 0.3 when none are given."""
        factors = []

        if context.domain is not None:
            own = pattern.domain.lower()
            wanted = context.domain.lower()
            if own == wanted:
                factors.append(1.0)
            elif wanted in own:
                factors.append(0.5)
            else:
                factors.append(0.0)

        if context.imports:
            template = pattern.template.lower()
            found = sum(1 for imp in context.imports if imp.lower() in template)
            factors.append(found / len(context.imports))

        if context.surrounding_code is not None:
            words = set(context.surrounding_code.split())
            template_words = set(pattern.template.split())
            factors.append(len(words & template_words) / max(len(words), 1))

        if not factors:
            return _NO_CONTEXT_SCORE
        return sum(factors) / len(factors)