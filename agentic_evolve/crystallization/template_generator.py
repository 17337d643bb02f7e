"""Turning concrete code into templates with ``{{NAME}}`` placeholders."""

from __future__ import annotations

import re
from typing import Iterable, Mapping

from ..model.pattern import PatternVariable

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def _placeholder(name: str) -> str:
    return "{{" + name + "}}"


class TemplateGenerator:
    """Generates and fills pattern templates."""

    def generate(self, code: str, variables: Iterable[PatternVariable]) -> str:
        """Replace the first occurrence of each variable's default with its placeholder."""
        template = code
        for var in variables:
            if var.default:
                template = template.replace(var.default, _placeholder(var.name), 1)
        return template

    def apply_bindings(self, template: str, bindings: Mapping[str, str]) -> str:
        """Substitute every occurrence of each bound placeholder."""
        result = template
        for key, value in bindings.items():
            result = result.replace(_placeholder(key), value)
        return result

    def extract_placeholders(self, template: str) -> list[str]:
        """Names of the placeholders in order of appearance, repeats included."""
        return _PLACEHOLDER.findall(template)

    def has_unbound_placeholders(self, template: str) -> bool:
        return "{{" in template and "}}" in template