"""Types describing the outcome of matching patterns against a signature."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .ids import PatternId
from .pattern import Pattern


@dataclass
class MatchScore:
    """Component scores of a match and their combination."""

    signature_score: float
    context_score: float
    semantic_score: float
    confidence_score: float
    combined: float

    @classmethod
    def combine(
        cls, signature: float, context: float, semantic: float, confidence: float
    ) -> MatchScore:
        """Weight the components into a combined score."""
        combined = signature * 0.4 + context * 0.2 + semantic * 0.2 + confidence * 0.2
        return cls(signature, context, semantic, confidence, combined)

    @classmethod
    def from_single(cls, score: float) -> MatchScore:
        """A score whose every component equals ``score``."""
        return cls(score, score, score, score, score)


@dataclass(frozen=True)
class MatchContext:
    """Context supplied to matchers."""

    domain: str | None = None
    surrounding_code: str | None = None
    imports: tuple[str, ...] = ()
    project_type: str | None = None
    max_results: int = 10

    def with_domain(self, domain: str) -> MatchContext:
        return replace(self, domain=domain)

    def with_surrounding_code(self, code: str) -> MatchContext:
        return replace(self, surrounding_code=code)

    def with_max_results(self, limit: int) -> MatchContext:
        return replace(self, max_results=limit)


@dataclass
class MatchResult:
    """A pattern together with how well it matched."""

    pattern_id: PatternId
    pattern: Pattern
    score: MatchScore
    suggested_bindings: dict[str, str] = field(default_factory=dict)