from agentic_evolve.composition.weaver import IntegrationWeaver
from agentic_evolve.model.pattern import FunctionSignature, Language, Pattern


def make_pattern(template):
    sig = FunctionSignature(name="p", language=Language.RUST)
    return Pattern.create("p", "web", Language.RUST, sig, template, [], 0.8)


def test_deduplicates_and_hoists_imports():
    a = make_pattern("use std::fmt;\nfn a() {}")
    b = make_pattern("use std::fmt;\nfn b() {}")
    result = IntegrationWeaver().weave([a, b])
    assert result.import_count == 1
    assert result.code == "use std::fmt;\n\nfn a() {}\n\nfn b() {}"


def test_imports_sorted():
    a = make_pattern("import os\nx = 1")
    b = make_pattern("from sys import argv\n#include <stdio.h>\ny = 2")
    result = IntegrationWeaver().weave([a, b])
    header = result.code.split("\n\n")[0].splitlines()
    assert header == sorted(header)
    assert result.import_count == len(header)


def test_no_imports():
    a = make_pattern("  first  ")
    b = make_pattern("second")
    result = IntegrationWeaver().weave([a, b])
    assert result.code == "first\n\nsecond"
    assert result.import_count == 0


def test_empty_input():
    result = IntegrationWeaver().weave([])
    assert result.code == ""
    assert result.patterns_used == []


def test_patterns_used_in_order():
    a = make_pattern("a")
    b = make_pattern("b")
    assert IntegrationWeaver().weave([a, b]).patterns_used == [str(a.id), str(b.id)]


def test_indented_import_is_hoisted():
    a = make_pattern("    use crate::x;\nbody")
    result = IntegrationWeaver().weave([a])
    assert result.code.startswith("use crate::x;\n\n")
    assert result.code.endswith("body")