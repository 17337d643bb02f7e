"""Promotion and demotion of patterns by their track record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from ..model.pattern import Pattern

_STEP = 0.1
_PRUNE_BELOW = 0.1


@dataclass
class PromotionConfig:
    """Success-rate thresholds and minimum use counts for decisions."""

    promote_threshold: float = 0.9
    demote_threshold: float = 0.3
    min_uses_for_promotion: int = 5
    min_uses_for_demotion: int = 3


class PromotionDecision(Enum):
    """What to do with a pattern."""

    PROMOTE = "promote"
    DEMOTE = "demote"
    MAINTAIN = "maintain"
    PRUNE = "prune"


@dataclass
class PromotionEngine:
    """Evaluates patterns and adjusts their confidence."""

    config: PromotionConfig = field(default_factory=PromotionConfig)

    def evaluate(self, pattern: Pattern) -> PromotionDecision:
        rate = pattern.success_rate()
        cfg = self.config
        if pattern.usage_count >= cfg.min_uses_for_promotion and rate >= cfg.promote_threshold:
            return PromotionDecision.PROMOTE
        if pattern.usage_count >= cfg.min_uses_for_demotion and rate < cfg.demote_threshold:
            if pattern.confidence < _PRUNE_BELOW:
                return PromotionDecision.PRUNE
            return PromotionDecision.DEMOTE
        return PromotionDecision.MAINTAIN

    def apply_promotion(self, pattern: Pattern) -> PromotionDecision:
        """Evaluate ``pattern`` and adjust its confidence accordingly."""
        decision = self.evaluate(pattern)
        if decision is PromotionDecision.PROMOTE:
            pattern.confidence = min(pattern.confidence + _STEP, 1.0)
        elif decision is PromotionDecision.DEMOTE:
            pattern.confidence = max(pattern.confidence - _STEP, 0.0)
        elif decision is PromotionDecision.PRUNE:
            pattern.confidence = 0.0
        return decision

    def batch_evaluate(
        self, patterns: Iterable[Pattern]
    ) -> list[tuple[str, PromotionDecision]]:
        return [(str(p.id), self.evaluate(p)) for p in patterns]