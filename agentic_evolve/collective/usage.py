"""Tracking how often and where patterns are used."""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass, field


@dataclass
class UsageRecord:
    """Usage statistics of one pattern; timestamps are Unix seconds."""

    total_uses: int = 0
    successful_uses: int = 0
    failed_uses: int = 0
    last_used: int = 0
    first_used: int = 0
    domains: Counter[str] = field(default_factory=Counter)


class UsageTracker:
    """Records uses per pattern id."""

    def __init__(self) -> None:
        self._records: dict[str, UsageRecord] = {}

    def record_use(self, pattern_id: str, domain: str, success: bool) -> None:
        now = int(time.time())
        rec = self._records.get(pattern_id)
        if rec is None:
            rec = self._records[pattern_id] = UsageRecord(first_used=now)
        rec.total_uses += 1
        if success:
            rec.successful_uses += 1
        else:
            rec.failed_uses += 1
        rec.last_used = now
        rec.domains[domain] += 1

    def get_usage(self, pattern_id: str) -> UsageRecord | None:
        return self._records.get(pattern_id)

    def success_rate(self, pattern_id: str) -> float:
        rec = self._records.get(pattern_id)
        if rec is None or rec.total_uses == 0:
            return 0.0
        return rec.successful_uses / rec.total_uses

    def most_used(self, limit: int) -> list[tuple[str, UsageRecord]]:
        entries = sorted(self._records.items(), key=lambda e: e[1].total_uses, reverse=True)
        return entries[:limit]

    def least_used(self, limit: int) -> list[tuple[str, UsageRecord]]:
        entries = sorted(self._records.items(), key=lambda e: e[1].total_uses)
        return entries[:limit]

    def total_patterns_tracked(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()