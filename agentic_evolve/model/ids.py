"""Identifier types for patterns, skills and other entities."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def _new_uuid() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class _Identifier:
    value: str = field(default_factory=_new_uuid)

    def __str__(self) -> str:
        return self.value


class EvolveId(_Identifier):
    """Unique identifier for any entity."""

    @classmethod
    def from_string(cls, s: str) -> EvolveId:
        """Wrap an existing identifier string."""
        return cls(s)


class PatternId(_Identifier):
    """Unique identifier for a pattern."""

    @classmethod
    def from_string(cls, s: str) -> PatternId:
        """Wrap an existing identifier string."""
        return cls(s)


class SkillId(_Identifier):
    """Unique identifier for a crystallized skill."""

    @classmethod
    def from_string(cls, s: str) -> SkillId:
        """Wrap an existing identifier string."""
        return cls(s)