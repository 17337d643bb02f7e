"""Versioned collections that answer "what changed since version N"."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Iterable, TypeVar, Union

T = TypeVar("T")


class ChangeType(Enum):
    """Kind of change recorded in the history."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class Unchanged:
    """No changes since the requested version."""

    version: int


@dataclass(frozen=True)
class Changed(Generic[T]):
    """Items created or updated since ``from_version``, and the number of deletions."""

    items: list[T]
    deletions: int
    from_version: int
    to_version: int


DeltaResult = Union[Unchanged, Changed]


@dataclass(frozen=True)
class _ChangeEntry:
    version: int
    change_type: ChangeType
    index: int


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class VersionedState(Generic[T]):
    """A list of items with a monotonically increasing version and change log."""

    _data: list[T] = field(default_factory=list)
    _version: int = 0
    _last_modified: datetime = field(default_factory=_now)
    _change_log: list[_ChangeEntry] = field(default_factory=list, repr=False)

    @classmethod
    def from_data(cls, data: Iterable[T]) -> "VersionedState[T]":
        """State holding ``data`` at version 1, every item recorded as created."""
        items = list(data)
        return cls(
            _data=items,
            _version=1,
            _change_log=[
                _ChangeEntry(1, ChangeType.CREATED, i) for i in range(len(items))
            ],
        )

    @property
    def version(self) -> int:
        return self._version

    @property
    def last_modified(self) -> datetime:
        return self._last_modified

    @property
    def data(self) -> tuple[T, ...]:
        return tuple(self._data)

    def _bump(self, change_type: ChangeType, index: int) -> None:
        self._version += 1
        self._last_modified = _now()
        self._change_log.append(_ChangeEntry(self._version, change_type, index))

    def add(self, item: T) -> None:
        self._data.append(item)
        self._bump(ChangeType.CREATED, len(self._data) - 1)

    def update(self, index: int, item: T) -> None:
        """Replace the item at ``index``; an index out of range is ignored."""
        if 0 <= index < len(self._data):
            self._data[index] = item
            self._bump(ChangeType.UPDATED, index)

    def delete(self, index: int) -> None:
        """Remove the item at ``index``; an index out of range is ignored."""
        if 0 <= index < len(self._data):
            del self._data[index]
            self._bump(ChangeType.DELETED, index)

    def changes_since_version(self, since_version: int) -> DeltaResult:
        """Changes after ``since_version``, or Unchanged if there are none."""
        if since_version >= self._version:
            return Unchanged(self._version)

        relevant = [e for e in self._change_log if e.version > since_version]
        if not relevant:
            return Unchanged(self._version)

        items: list[T] = []
        deletions = 0
        for entry in relevant:
            if entry.change_type is ChangeType.DELETED:
                deletions += 1
            elif entry.index < len(self._data):
                items.append(self._data[entry.index])

        return Changed(
            items=items,
            deletions=deletions,
            from_version=since_version,
            to_version=self._version,
        )

    def is_unchanged_since(self, since_version: int) -> bool:
        return since_version >= self._version