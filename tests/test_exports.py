"""Export registry stories: discovery, signatures, and dispatch by name."""

from __future__ import annotations

import pytest

import funcset
from funcset.domain.exports import EXPORTS, ExportedFunction, get_export
from funcset.domain.errors import UnknownExportError


@pytest.mark.os_agnostic
def test_exports_are_listed_in_declaration_order() -> None:
    assert list(EXPORTS) == ["add", "greet", "age_comparator"]


@pytest.mark.os_agnostic
def test_export_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        EXPORTS["multiply"] = EXPORTS["add"]  # type: ignore[index]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("name", "signature"),
    [
        ("add", "add(left: u64, right: u64) -> u64"),
        ("greet", "greet(name: string) -> string"),
        ("age_comparator", "age_comparator(age: i8) -> string"),
    ],
)
def test_signatures_use_host_type_labels(name: str, signature: str) -> None:
    assert EXPORTS[name].signature == signature


@pytest.mark.os_agnostic
def test_exports_dispatch_to_the_domain_functions() -> None:
    assert get_export("add")(2, 2) == 4
    assert get_export("greet")("World") == "Hello, World!"
    assert get_export("age_comparator")(18) == "Congrats You gained the Rights to Vote"


@pytest.mark.os_agnostic
def test_export_forwards_keyword_arguments() -> None:
    assert get_export("add")(funcset.U64_MAX, 1, policy=funcset.OverflowPolicy.SATURATE) == funcset.U64_MAX


@pytest.mark.os_agnostic
def test_unknown_export_names_the_available_ones() -> None:
    with pytest.raises(UnknownExportError, match="available: add, greet, age_comparator"):
        get_export("multiply")


@pytest.mark.os_agnostic
def test_unknown_export_is_a_lookup_error() -> None:
    with pytest.raises(LookupError):
        get_export("")


@pytest.mark.os_agnostic
def test_describe_is_json_ready() -> None:
    assert EXPORTS["age_comparator"].describe() == {
        "name": "age_comparator",
        "parameters": [{"name": "age", "type": "i8"}],
        "returns": "string",
        "summary": "Report voting eligibility for an age.",
    }


@pytest.mark.os_agnostic
def test_exported_function_is_frozen() -> None:
    entry: ExportedFunction = EXPORTS["greet"]

    with pytest.raises(AttributeError):
        entry.name = "hello"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_package_surface_exposes_the_function_set() -> None:
    assert funcset.add(2, 2) == 4
    assert funcset.greet("") == "Hello, !"
    assert funcset.age_comparator(20) == "You are 20 Eligible To Vote"
    assert funcset.get_export("greet") is funcset.EXPORTS["greet"]
