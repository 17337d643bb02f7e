"""Extracting reusable patterns from successfully executed code."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..model.pattern import (
    FunctionSignature,
    Language,
    ParamSignature,
    Pattern,
    Visibility,
)
from ..model.skill import SuccessfulExecution
from .confidence import ConfidenceCalculator
from .template_generator import TemplateGenerator
from .variable_detector import VariableDetector

_MIN_CONFIDENCE = 0.5

_RUST_FN = re.compile(
    r"^(\s*)(pub\s+)?(async\s+)?fn\s+(\w+)\s*(\([^)]*\))\s*(->\s*[^{]+)?\s*\{",
    re.MULTILINE,
)
_PYTHON_DEF = re.compile(
    r"^(\s*)(async\s+)?def\s+(\w+)\s*\(([^)]*)\)\s*(?:->\s*([^:]+))?\s*:",
    re.MULTILINE,
)
_RUST_SELF = frozenset({"&self", "&mut self", "self"})
_PYTHON_SELF = frozenset({"self", "cls"})


@dataclass
class _ExtractedFunction:
    name: str
    body: str
    params: list[ParamSignature] = field(default_factory=list)
    return_type: str | None = None
    is_async: bool = False
    visibility: Visibility = Visibility.PUBLIC


def _extract_braced_body(code: str, start: int) -> str:
    depth = 1
    end = start
    for i, ch in enumerate(code[start:], start):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                end = i
                break
    return code[start:end].strip()


def _extract_indented_body(code: str, start: int, base_indent: int) -> str:
    lines: list[str] = []
    for line in code[start:].splitlines():
        if not line.strip():
            lines.append("")
            continue
        indent = len(line) - len(line.lstrip())
        if indent > base_indent:
            lines.append(line)
        elif lines:
            break
    return "\n".join(lines).strip()


def _strip_arrow(text: str) -> str:
    while text.startswith("->"):
        text = text[2:]
    return text.strip()


def _parse_rust_params(params: str) -> list[ParamSignature]:
    inner = params.lstrip("(").rstrip(")")
    result = []
    for raw in inner.split(","):
        p = raw.strip()
        if not p or p in _RUST_SELF:
            continue
        name, sep, type_part = p.partition(":")
        if not sep:
            continue
        result.append(
            ParamSignature(
                name=name.strip(),
                param_type=type_part.strip(),
                is_optional="Option" in type_part,
            )
        )
    return result


def _parse_python_params(params: str) -> list[ParamSignature]:
    result = []
    for raw in params.split(","):
        p = raw.strip()
        if not p or p in _PYTHON_SELF:
            continue
        name, sep, type_part = p.partition(":")
        param_type = type_part.split("=", 1)[0].strip() if sep else "Any"
        result.append(
            ParamSignature(name=name.strip(), param_type=param_type, is_optional="=" in p)
        )
    return result


def _rust_functions(code: str) -> list[_ExtractedFunction]:
    functions = []
    for m in _RUST_FN.finditer(code):
        return_type = m.group(6)
        functions.append(
            _ExtractedFunction(
                name=m.group(4),
                body=_extract_braced_body(code, m.end()),
                params=_parse_rust_params(m.group(5)),
                return_type=_strip_arrow(return_type) if return_type is not None else None,
                is_async=m.group(3) is not None,
                visibility=Visibility.PUBLIC if m.group(2) is not None else Visibility.PRIVATE,
            )
        )
    return functions


def _python_functions(code: str) -> list[_ExtractedFunction]:
    functions = []
    for m in _PYTHON_DEF.finditer(code):
        return_type = m.group(5)
        functions.append(
            _ExtractedFunction(
                name=m.group(3),
                body=_extract_indented_body(code, m.end(), len(m.group(1))),
                params=_parse_python_params(m.group(4)),
                return_type=return_type.strip() if return_type is not None else None,
                is_async=m.group(2) is not None,
                visibility=Visibility.PUBLIC,
            )
        )
    return functions


class PatternExtractor:
    """Finds functions in executed code and turns each into a pattern."""

    def __init__(self) -> None:
        self._variables = VariableDetector()
        self._templates = TemplateGenerator()
        self._confidence = ConfidenceCalculator()

    def extract(self, execution: SuccessfulExecution) -> list[Pattern]:
        """Patterns for every function found, when confidence reaches 0.5.

        Rust and Python code is split into its functions; code in any other
        language is treated as a single function named ``main``.
        """
        language = execution.language
        if language == Language.RUST:
            functions = _rust_functions(execution.code)
        elif language == Language.PYTHON:
            functions = _python_functions(execution.code)
        else:
            functions = [_ExtractedFunction(name="main", body=execution.code)]

        confidence = self._confidence.calculate(execution)
        if confidence < _MIN_CONFIDENCE:
            return []

        patterns = []
        for func in functions:
            variables = self._variables.detect(func.body, language)
            template = self._templates.generate(func.body, variables)
            signature = FunctionSignature(
                name=func.name,
                language=language,
                params=list(func.params),
                return_type=func.return_type,
                is_async=func.is_async,
                visibility=func.visibility,
            )
            patterns.append(
                Pattern.create(
                    func.name,
                    execution.domain,
                    language,
                    signature,
                    template,
                    variables,
                    confidence,
                )
            )
        return patterns