"""Composing several pattern templates into one piece of code."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from ..model.errors import CompositionError
from ..model.pattern import Pattern

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


@dataclass
class CompositionResult:
    """Composed code with the patterns used, binding coverage and unbound names."""

    code: str
    patterns_used: list[str] = field(default_factory=list)
    coverage: float = 1.0
    gaps: list[str] = field(default_factory=list)


class PatternComposer:
    """Renders patterns with bindings and joins them."""

    def compose(
        self,
        patterns: Sequence[Pattern],
        bindings: Mapping[str, str],
        order: Sequence[int] | None = None,
    ) -> CompositionResult:
        """Render ``patterns`` (in ``order`` if given) and join them with blank lines.

        Indices in ``order`` that do not refer to a pattern are skipped.
        Raises CompositionError when there are no patterns.
        """
        if not patterns:
            raise CompositionError("No patterns to compose")

        if order is None:
            ordered = list(patterns)
        else:
            ordered = [patterns[i] for i in order if 0 <= i < len(patterns)]

        parts: list[str] = []
        used: list[str] = []
        total_placeholders = 0
        bound_placeholders = 0

        for pattern in ordered:
            rendered = pattern.template
            for key, value in bindings.items():
                placeholder = "{{" + key + "}}"
                if placeholder in rendered:
                    rendered = rendered.replace(placeholder, value)
                    bound_placeholders += 1
            total_placeholders += len(_PLACEHOLDER.findall(rendered)) + bound_placeholders
            parts.append(rendered)
            used.append(str(pattern.id))

        code = "\n\n".join(parts)
        coverage = (
            1.0 if total_placeholders == 0 else bound_placeholders / total_placeholders
        )
        return CompositionResult(
            code=code,
            patterns_used=used,
            coverage=coverage,
            gaps=_PLACEHOLDER.findall(code),
        )