"""Deduplication, similarity and pruning analysis of stored patterns."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from ..model.pattern import Pattern

_ESTIMATED_BYTES_PER_PATTERN = 1024


def template_similarity(a: str, b: str) -> float:
    """Fraction of aligned lines that are equal ignoring surrounding whitespace."""
    a_lines = a.splitlines()
    b_lines = b.splitlines()
    max_lines = max(len(a_lines), len(b_lines))
    if max_lines == 0:
        return 1.0
    matching = sum(1 for x, y in zip(a_lines, b_lines) if x.strip() == y.strip())
    return matching / max_lines


@dataclass
class OptimizationReport:
    """Summary of what an optimization pass would achieve."""

    patterns_before: int
    patterns_after: int
    duplicates_removed: int
    pruned: int
    merged: int
    bytes_saved: int


class PatternOptimizer:
    """Finds duplicate, similar and prunable patterns."""

    def find_duplicates(self, patterns: Sequence[Pattern]) -> list[tuple[str, str]]:
        """Id pairs of patterns with the same content hash."""
        return [
            (str(a.id), str(b.id))
            for a, b in combinations(patterns, 2)
            if a.content_hash == b.content_hash
        ]

    def find_similar(
        self, patterns: Sequence[Pattern], threshold: float
    ) -> list[tuple[str, str, float]]:
        """Id pairs of non-identical patterns whose templates are at least ``threshold`` alike."""
        similar = []
        for a, b in combinations(patterns, 2):
            sim = template_similarity(a.template, b.template)
            if sim >= threshold and a.content_hash != b.content_hash:
                similar.append((str(a.id), str(b.id), sim))
        return similar

    def suggest_pruning(
        self, patterns: Sequence[Pattern], min_confidence: float, min_uses: int
    ) -> list[str]:
        """Ids of patterns below both the confidence and the usage minimum."""
        return [
            str(p.id)
            for p in patterns
            if p.confidence < min_confidence and p.usage_count < min_uses
        ]

    def optimize_report(self, patterns: Sequence[Pattern]) -> OptimizationReport:
        duplicates = self.find_duplicates(patterns)
        prunable = self.suggest_pruning(patterns, 0.2, 2)
        removed = len(duplicates) + len(prunable)
        return OptimizationReport(
            patterns_before=len(patterns),
            patterns_after=max(len(patterns) - removed, 0),
            duplicates_removed=len(duplicates),
            pruned=len(prunable),
            merged=0,
            bytes_saved=removed * _ESTIMATED_BYTES_PER_PATTERN,
        )