"""Crystallized skills and the execution records they come from."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

from .ids import PatternId, SkillId
from .pattern import Language


class Complexity(Enum):
    """Complexity level of a skill."""

    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


@dataclass
class SkillMetadata:
    """Metadata about a crystallized skill."""

    domain: str
    language: Language
    complexity: Complexity
    source: str


@dataclass
class CrystallizedSkill:
    """A verified instantiation of a pattern."""

    id: SkillId
    pattern_id: PatternId
    code: str
    bindings: dict[str, str]
    metadata: SkillMetadata
    verified_count: int = 1
    last_verified: int = 0
    created_at: int = 0

    @classmethod
    def create(
        cls,
        pattern_id: PatternId,
        code: str,
        bindings: dict[str, str],
        metadata: SkillMetadata,
    ) -> CrystallizedSkill:
        """Build a new skill, counted as verified once."""
        now = int(time.time())
        return cls(
            id=SkillId(),
            pattern_id=pattern_id,
            code=code,
            bindings=dict(bindings),
            metadata=metadata,
            verified_count=1,
            last_verified=now,
            created_at=now,
        )

    def record_verification(self) -> None:
        self.verified_count += 1
        self.last_verified = int(time.time())


@dataclass
class TestResult:
    """Result of a single test run."""

    __test__ = False

    name: str
    passed: bool
    duration_ms: int = 0


@dataclass
class SuccessfulExecution:
    """A successful code execution that may be crystallized into patterns."""

    code: str
    language: Language
    domain: str
    test_results: list[TestResult] = field(default_factory=list)
    execution_time_ms: int = 0