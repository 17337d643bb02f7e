"""Exception hierarchy for the pattern engine."""

from __future__ import annotations


class EvolveError(Exception):
    """Base class for every error raised by the pattern engine."""

    label = "Evolve error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(f"{self.label}: {detail}")
        self.detail = detail


class PatternNotFound(EvolveError):
    """A pattern (or pattern version) does not exist."""

    label = "Pattern not found"


class SkillNotFound(EvolveError):
    """A crystallized skill does not exist."""

    label = "Skill not found"


class InvalidPattern(EvolveError):
    """A pattern is malformed."""

    label = "Invalid pattern"


class StorageError(EvolveError):
    """Persisted pattern data could not be read or written."""

    label = "Storage error"


class SerializationError(EvolveError):
    """A value could not be converted to or from its serialized form."""

    label = "Serialization error"


class MatchingError(EvolveError):
    """Pattern matching failed."""

    label = "Matching error"


class CrystallizationError(EvolveError):
    """Patterns could not be extracted from code."""

    label = "Crystallization error"


class CompositionError(EvolveError):
    """Patterns could not be composed."""

    label = "Composition error"


class TemplateError(EvolveError):
    """A template could not be rendered."""

    label = "Template error"