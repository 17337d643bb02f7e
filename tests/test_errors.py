import pytest

from agentic_evolve.model.errors import (
    CompositionError,
    CrystallizationError,
    EvolveError,
    InvalidPattern,
    MatchingError,
    PatternNotFound,
    SerializationError,
    SkillNotFound,
    StorageError,
    TemplateError,
)
from agentic_evolve.model.pattern import Pattern


@pytest.mark.parametrize(
    ("error_cls", "prefix"),
    [
        (PatternNotFound, "Pattern not found"),
        (SkillNotFound, "Skill not found"),
        (InvalidPattern, "Invalid pattern"),
        (StorageError, "Storage error"),
        (SerializationError, "Serialization error"),
        (MatchingError, "Matching error"),
        (CrystallizationError, "Crystallization error"),
        (CompositionError, "Composition error"),
        (TemplateError, "Template error"),
    ],
)
def test_message_format(error_cls, prefix):
    err = error_cls("detail-x")
    assert str(err) == f"{prefix}: detail-x"
    assert err.detail == "detail-x"


def test_package_errors_are_caught_as_base():
    with pytest.raises(EvolveError) as info:
        Pattern.from_dict({})
    assert str(info.value).startswith("Serialization error: ")
    assert "invalid pattern" in info.value.detail


def test_distinct_kinds_are_not_interchangeable():
    with pytest.raises(SerializationError) as info:
        Pattern.from_dict({"id": "x"})
    assert not isinstance(info.value, PatternNotFound)
    assert str(info.value).startswith("Serialization error")