"""In-memory index for looking up patterns by name, domain, language, tag and return type."""

from __future__ import annotations

from collections import defaultdict

from ..model.pattern import Pattern


class PatternIndex:
    """Maps lower-cased attributes of patterns to the ids that carry them."""

    def __init__(self) -> None:
        self._by_name: defaultdict[str, set[str]] = defaultdict(set)
        self._by_domain: defaultdict[str, set[str]] = defaultdict(set)
        self._by_language: defaultdict[str, set[str]] = defaultdict(set)
        self._by_tag: defaultdict[str, set[str]] = defaultdict(set)
        self._by_return_type: defaultdict[str, set[str]] = defaultdict(set)

    def _tables(self) -> tuple[defaultdict[str, set[str]], ...]:
        return (
            self._by_name,
            self._by_domain,
            self._by_language,
            self._by_tag,
            self._by_return_type,
        )

    def add(self, pattern: Pattern) -> None:
        pid = str(pattern.id)
        self._by_name[pattern.name.lower()].add(pid)
        self._by_domain[pattern.domain.lower()].add(pid)
        self._by_language[pattern.language.name].add(pid)
        for tag in pattern.tags:
            self._by_tag[tag.lower()].add(pid)
        if pattern.signature.return_type is not None:
            self._by_return_type[pattern.signature.return_type.lower()].add(pid)

    def remove(self, pattern: Pattern) -> None:
        pid = str(pattern.id)
        for table in self._tables():
            for ids in table.values():
                ids.discard(pid)

    @staticmethod
    def _lookup(table: dict[str, set[str]], key: str) -> list[str]:
        return sorted(table.get(key, ()))

    def find_by_name(self, name: str) -> list[str]:
        return self._lookup(self._by_name, name.lower())

    def find_by_domain(self, domain: str) -> list[str]:
        return self._lookup(self._by_domain, domain.lower())

    def find_by_language(self, language: str) -> list[str]:
        """Ids for a canonical language name such as ``"rust"`` (case-sensitive)."""
        return self._lookup(self._by_language, language)

    def find_by_tag(self, tag: str) -> list[str]:
        return self._lookup(self._by_tag, tag.lower())

    def find_by_return_type(self, return_type: str) -> list[str]:
        return self._lookup(self._by_return_type, return_type.lower())

    def search(self, query: str) -> set[str]:
        """Ids whose name, domain or any tag contains ``query``, case-insensitively."""
        needle = query.lower()
        return {
            pid
            for table in (self._by_name, self._by_domain, self._by_tag)
            for key, ids in table.items()
            if needle in key
            for pid in ids
        }

    def total_indexed(self) -> int:
        return len(set().union(*self._by_name.values()))

    def clear(self) -> None:
        for table in self._tables():
            table.clear()