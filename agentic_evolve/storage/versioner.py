"""Version history of patterns as JSON snapshots."""

from __future__ import annotations

import json
import time
from collections import defaultdict
from dataclasses import dataclass

from ..model.errors import PatternNotFound, SerializationError
from ..model.pattern import Pattern


@dataclass(frozen=True)
class VersionEntry:
    """One recorded version of a pattern."""

    version: int
    pattern_snapshot: str
    created_at: int
    change_description: str


class PatternVersioner:
    """Keeps an ordered list of snapshots for each pattern id."""

    def __init__(self) -> None:
        self._history: defaultdict[str, list[VersionEntry]] = defaultdict(list)

    def record_version(self, pattern: Pattern, description: str) -> int:
        """Snapshot ``pattern`` and return the version it was recorded under."""
        try:
            snapshot = json.dumps(pattern.to_dict())
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc
        entry = VersionEntry(
            version=pattern.version,
            pattern_snapshot=snapshot,
            created_at=int(time.time()),
            change_description=description,
        )
        self._history[str(pattern.id)].append(entry)
        return pattern.version

    def get_history(self, pattern_id: str) -> list[VersionEntry]:
        return list(self._history.get(pattern_id, ()))

    def get_version(self, pattern_id: str, version: int) -> VersionEntry:
        """The first entry recorded with ``version``; raises PatternNotFound."""
        entries = self._history.get(pattern_id)
        if entries is None:
            raise PatternNotFound(pattern_id)
        for entry in entries:
            if entry.version == version:
                return entry
        raise PatternNotFound(f"{pattern_id}@v{version}")

    def latest_version(self, pattern_id: str) -> int | None:
        entries = self._history.get(pattern_id)
        return entries[-1].version if entries else None

    def total_versions(self) -> int:
        return sum(len(entries) for entries in self._history.values())

    def clear(self) -> None:
        self._history.clear()