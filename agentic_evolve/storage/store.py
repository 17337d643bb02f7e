"""Pattern storage: in memory, optionally mirrored to one JSON file per pattern."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..model.errors import PatternNotFound, SerializationError
from ..model.pattern import Pattern

logger = logging.getLogger(__name__)


class PatternStore:
    """Holds patterns by id; with a data directory, persists each as ``<id>.json``."""

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self._patterns: dict[str, Pattern] = {}
        self._data_dir = Path(data_dir) if data_dir is not None else None
        if self._data_dir is not None:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            self._load_all()

    @property
    def data_dir(self) -> Path | None:
        return self._data_dir

    def _path_for(self, pattern_id: str) -> Path:
        assert self._data_dir is not None
        return self._data_dir / f"{pattern_id}.json"

    def save(self, pattern: Pattern) -> None:
        pid = str(pattern.id)
        self._patterns[pid] = pattern
        if self._data_dir is not None:
            text = json.dumps(pattern.to_dict(), indent=2)
            self._path_for(pid).write_text(text, encoding="utf-8")

    def get(self, pattern_id: str) -> Pattern:
        """Return the stored pattern; raises PatternNotFound."""
        try:
            return self._patterns[pattern_id]
        except KeyError:
            raise PatternNotFound(pattern_id) from None

    def delete(self, pattern_id: str) -> Pattern:
        """Remove and return a pattern, deleting its file; raises PatternNotFound."""
        try:
            pattern = self._patterns.pop(pattern_id)
        except KeyError:
            raise PatternNotFound(pattern_id) from None
        if self._data_dir is not None:
            self._path_for(pattern_id).unlink(missing_ok=True)
        return pattern

    def list(self) -> list[Pattern]:
        return list(self._patterns.values())

    def list_by_domain(self, domain: str) -> list[Pattern]:
        return [p for p in self._patterns.values() if p.domain == domain]

    def list_by_language(self, language: str) -> list[Pattern]:
        return [p for p in self._patterns.values() if p.language.name == language]

    def search(self, query: str) -> list[Pattern]:
        """Patterns whose name, domain, template or a tag contains ``query``."""
        needle = query.lower()
        return [
            p
            for p in self._patterns.values()
            if needle in p.name.lower()
            or needle in p.domain.lower()
            or needle in p.template.lower()
            or any(needle in t.lower() for t in p.tags)
        ]

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, pattern_id: object) -> bool:
        return pattern_id in self._patterns

    def clear(self) -> None:
        """Drop every pattern and delete the JSON files in the data directory."""
        self._patterns.clear()
        if self._data_dir is not None and self._data_dir.exists():
            for path in self._data_dir.glob("*.json"):
                if path.is_file():
                    path.unlink()

    def _load_all(self) -> None:
        assert self._data_dir is not None
        for path in sorted(self._data_dir.glob("*.json")):
            if not path.is_file():
                continue
            content = path.read_text(encoding="utf-8")
            try:
                pattern = Pattern.from_dict(json.loads(content))
            except (json.JSONDecodeError, SerializationError) as exc:
                logger.warning("Failed to load pattern from %s: %s", path, exc)
                continue
            self._patterns[str(pattern.id)] = pattern