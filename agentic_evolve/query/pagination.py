"""Cursor-based pagination."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Generic, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_CURSOR = re.compile(r"\+?[0-9]+")


def _parse_cursor(cursor: str | None) -> int:
    if cursor is None or not _CURSOR.fullmatch(cursor):
        return 0
    return int(cursor)


@dataclass
class CursorPage(Generic[T]):
    """One page of results; the cursor is the start index of the next page."""

    items: list[T] = field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False
    total: int | None = None

    @classmethod
    def from_slice(
        cls, data: Sequence[T], cursor: str | None, limit: int
    ) -> "CursorPage[T]":
        """Page of up to ``limit`` items starting at ``cursor``; a bad cursor means 0."""
        start = min(_parse_cursor(cursor), len(data))
        end = min(start + limit, len(data))
        has_more = end < len(data)
        return cls(
            items=list(data[start:end]),
            next_cursor=str(end) if has_more else None,
            has_more=has_more,
            total=len(data),
        )

    def count(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def map(self, func: Callable[[T], U]) -> "CursorPage[U]":
        """Same page with ``func`` applied to each item."""
        return CursorPage(
            items=[func(item) for item in self.items],
            next_cursor=self.next_cursor,
            has_more=self.has_more,
            total=self.total,
        )