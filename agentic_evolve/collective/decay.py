"""Confidence decay of patterns that go unused."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable

from ..model.pattern import Pattern

_SECONDS_PER_DAY = 86400.0


@dataclass
class DecayConfig:
    """How quickly confidence decays and how much use restores it."""

    half_life_days: float = 30.0
    min_confidence: float = 0.1
    usage_boost: float = 0.05
    success_boost: float = 0.1


@dataclass
class DecayReport:
    """How many patterns are healthy, decaying, critical and prunable."""

    total: int
    healthy: int
    decaying: int
    critical: int
    prunable: int


def _days_since_use(pattern: Pattern) -> float:
    return (int(time.time()) - pattern.last_used) / _SECONDS_PER_DAY


@dataclass
class DecayManager:
    """Applies half-life decay and usage boosts to pattern confidence."""

    config: DecayConfig = field(default_factory=DecayConfig)

    def apply_decay(self, pattern: Pattern) -> float:
        """Decay confidence by time since last use, never below the minimum."""
        days = _days_since_use(pattern)
        if days <= 0.0:
            return pattern.confidence
        factor = 0.5 ** (days / self.config.half_life_days)
        pattern.confidence = max(pattern.confidence * factor, self.config.min_confidence)
        return pattern.confidence

    def apply_usage_boost(self, pattern: Pattern, success: bool) -> float:
        """Raise confidence for a use, more for a successful one, capped at 1.0."""
        boost = self.config.usage_boost
        if success:
            boost += self.config.success_boost
        pattern.confidence = min(pattern.confidence + boost, 1.0)
        return pattern.confidence

    def should_prune(self, pattern: Pattern) -> bool:
        """True for a barely used pattern at minimum confidence, idle for three half-lives."""
        return (
            pattern.confidence <= self.config.min_confidence
            and _days_since_use(pattern) > self.config.half_life_days * 3.0
            and pattern.usage_count < 3
        )

    def decay_report(self, patterns: Iterable[Pattern]) -> DecayReport:
        patterns = list(patterns)
        healthy = sum(1 for p in patterns if p.confidence > 0.7)
        decaying = sum(1 for p in patterns if 0.3 < p.confidence <= 0.7)
        return DecayReport(
            total=len(patterns),
            healthy=healthy,
            decaying=decaying,
            critical=len(patterns) - healthy - decaying,
            prunable=sum(1 for p in patterns if self.should_prune(p)),
        )