"""Detection of the parts of code that vary between uses."""

from __future__ import annotations

import re

from ..model.pattern import Language, PatternVariable

_STRING = re.compile(r'"([^"]{3,})"')
_NUMBER = re.compile(r"\b(\d{2,})\b")
_TYPE_NAME = re.compile(r"\b([A-Z][a-zA-Z0-9]+)\b")
_TYPE_PATTERN = r"[A-Z]\w+"
_NUMBER_PATTERN = r"\d+"

_COMMON_RUST_TYPES = frozenset(
    {
        "String", "Vec", "HashMap", "HashSet", "Option", "Result", "Box", "Arc",
        "Rc", "Mutex", "RwLock", "Cell", "RefCell", "Self", "Ok", "Err", "Some",
        "None", "Default", "Debug", "Clone", "Copy", "Send", "Sync", "Display",
        "Error", "Serialize", "Deserialize", "Value", "Path", "PathBuf",
    }
)

_COMMON_PYTHON_TYPES = frozenset(
    {
        "True", "False", "None", "List", "Dict", "Set", "Tuple", "Optional",
        "Union", "Any", "Type", "Callable", "Iterator", "Exception", "ValueError",
        "TypeError", "KeyError",
    }
)


class VariableDetector:
    """Finds string literals, numbers and project-specific type names in code."""

    def detect(self, code: str, language: Language) -> list[PatternVariable]:
        """Variables in order: strings, then numbers, then type names."""
        variables = [
            PatternVariable(name=f"STRING_{i}", var_type="string", default=m.group(1))
            for i, m in enumerate(_STRING.finditer(code))
        ]
        variables.extend(
            PatternVariable(
                name=f"NUMBER_{i}",
                var_type="number",
                pattern=_NUMBER_PATTERN,
                default=m.group(1),
            )
            for i, m in enumerate(_NUMBER.finditer(code))
        )

        if language == Language.RUST:
            common = _COMMON_RUST_TYPES
        elif language == Language.PYTHON:
            common = _COMMON_PYTHON_TYPES
        else:
            return variables

        seen: set[str] = set()
        for m in _TYPE_NAME.finditer(code):
            name = m.group(1)
            if name in common or name in seen:
                continue
            seen.add(name)
            variables.append(
                PatternVariable(
                    name=f"TYPE_{name}",
                    var_type="type",
                    pattern=_TYPE_PATTERN,
                    default=name,
                )
            )
        return variables