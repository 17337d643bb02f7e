"""Confidence scoring for code that executed successfully."""

from __future__ import annotations

from dataclasses import dataclass

from ..model.skill import SuccessfulExecution

_OPENERS = frozenset("{([")
_CLOSERS = frozenset("})]")


def max_nesting_depth(code: str) -> int:
    """Deepest nesting of brackets, braces and parentheses in ``code``."""
    depth = 0
    deepest = 0
    for ch in code:
        if ch in _OPENERS:
            depth += 1
            deepest = max(deepest, depth)
        elif ch in _CLOSERS:
            depth = max(depth - 1, 0)
    return deepest


def _time_score(execution_time_ms: int) -> float:
    if execution_time_ms <= 100:
        return 1.0
    if execution_time_ms <= 500:
        return 0.9
    if execution_time_ms <= 1000:
        return 0.8
    if execution_time_ms <= 5000:
        return 0.6
    return 0.4


def _line_score(lines: int) -> float:
    if lines <= 5:
        return 0.9
    if lines <= 50:
        return 1.0
    if lines <= 200:
        return 0.8
    return 0.6


def _nesting_score(nesting: int) -> float:
    if nesting <= 2:
        return 1.0
    if nesting <= 4:
        return 0.8
    if nesting <= 6:
        return 0.6
    return 0.4


@dataclass
class ConfidenceCalculator:
    """Weighs test results, execution time and code complexity into a score."""

    test_weight: float = 0.5
    execution_time_weight: float = 0.2
    code_complexity_weight: float = 0.3

    def calculate(self, execution: SuccessfulExecution) -> float:
        """Confidence in ``[0, 1]`` that the executed code is a good pattern."""
        raw = (
            self._test_score(execution) * self.test_weight
            + _time_score(execution.execution_time_ms) * self.execution_time_weight
            + self._complexity_score(execution.code) * self.code_complexity_weight
        )
        return min(max(raw, 0.0), 1.0)

    @staticmethod
    def _test_score(execution: SuccessfulExecution) -> float:
        results = execution.test_results
        if not results:
            return 0.5
        return sum(1 for t in results if t.passed) / len(results)

    @staticmethod
    def _complexity_score(code: str) -> float:
        lines = len(code.splitlines())
        return (_line_score(lines) + _nesting_score(max_nesting_depth(code))) / 2.0