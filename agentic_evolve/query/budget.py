"""Per-request token budgets."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class TokenBudget:
    """Tracks tokens spent against a maximum allocation."""

    max_tokens: int
    used_tokens: int = 0

    def spend(self, tokens: int) -> bool:
        """Spend ``tokens``; False if the limit is now exceeded (the spend still counts)."""
        self.used_tokens += tokens
        return self.used_tokens <= self.max_tokens

    def remaining(self) -> int:
        """Tokens left before the budget is exhausted, never negative."""
        return max(self.max_tokens - self.used_tokens, 0)

    def is_exhausted(self) -> bool:
        return self.used_tokens >= self.max_tokens

    def can_afford(self, cost: int) -> bool:
        """Whether ``cost`` more tokens fit within the budget."""
        return self.used_tokens + cost <= self.max_tokens

    def utilization(self) -> float:
        """Fraction of the budget used; above 1.0 when overspent, infinite for a spent zero budget."""
        if self.max_tokens == 0:
            return 0.0 if self.used_tokens == 0 else math.inf
        return self.used_tokens / self.max_tokens

    def reset(self) -> None:
        self.used_tokens = 0