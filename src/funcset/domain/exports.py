"""Registry of the functions this package exports to its hosts.

Hosts discover the exported set by name and read each entry's signature in
host-facing type labels (``u64``, ``i8``, ``string``) rather than Python types.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .behaviors import add, age_comparator, greet
from .errors import UnknownExportError


@dataclass(frozen=True, slots=True)
class ExportedFunction:
    """A single exported function with its host-facing signature.

    Attributes:
        name: Name the host calls the function by.
        parameters: Ordered ``(parameter name, host type)`` pairs.
        returns: Host type of the result.
        summary: One-line description shown in listings.
        func: The bound domain function.

    Example:
        >>> entry = EXPORTS["greet"]
        >>> entry.signature
        'greet(name: string) -> string'
        >>> entry("World")
        'Hello, World!'
    """

    name: str
    parameters: tuple[tuple[str, str], ...]
    returns: str
    summary: str
    func: Callable[..., Any]

    @property
    def signature(self) -> str:
        params = ", ".join(f"{param}: {type_label}" for param, type_label in self.parameters)
        return f"{self.name}({params}) -> {self.returns}"

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.func(*args, **kwargs)

    def describe(self) -> dict[str, Any]:
        """Return a JSON-ready description of this export.

        Example:
            >>> EXPORTS["add"].describe()["parameters"]
            [{'name': 'left', 'type': 'u64'}, {'name': 'right', 'type': 'u64'}]
        """
        return {
            "name": self.name,
            "parameters": [{"name": param, "type": type_label} for param, type_label in self.parameters],
            "returns": self.returns,
            "summary": self.summary,
        }


EXPORTS: Mapping[str, ExportedFunction] = MappingProxyType(
    {
        "add": ExportedFunction(
            name="add",
            parameters=(("left", "u64"), ("right", "u64")),
            returns="u64",
            summary="Sum two unsigned 64-bit integers.",
            func=add,
        ),
        "greet": ExportedFunction(
            name="greet",
            parameters=(("name", "string"),),
            returns="string",
            summary="Greet a name.",
            func=greet,
        ),
        "age_comparator": ExportedFunction(
            name="age_comparator",
            parameters=(("age", "i8"),),
            returns="string",
            summary="Report voting eligibility for an age.",
            func=age_comparator,
        ),
    }
)


def get_export(name: str) -> ExportedFunction:
    """Look up an exported function by name.

    Raises:
        UnknownExportError: If ``name`` is not exported.

    Example:
        >>> get_export("add")(2, 2)
        4
    """
    try:
        return EXPORTS[name]
    except KeyError:
        available = ", ".join(EXPORTS)
        raise UnknownExportError(f"No exported function named {name!r} (available: {available})") from None


__all__ = [
    "EXPORTS",
    "ExportedFunction",
    "get_export",
]
