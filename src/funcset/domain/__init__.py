"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The exported functions (add, greet, age_comparator)
    * :mod:`.exports` - Name registry describing the exported function set
    * :mod:`.enums` - Domain enumerations (OverflowPolicy, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    ELIGIBLE_AGE,
    I8_MAX,
    I8_MIN,
    U64_MAX,
    add,
    age_comparator,
    greet,
)
from .enums import OutputFormat, OverflowPolicy
from .errors import (
    ArithmeticOverflowError,
    ConfigurationError,
    OperandOutOfRangeError,
    UnknownExportError,
)
from .exports import EXPORTS, ExportedFunction, get_export

__all__ = [
    # Behaviors
    "ELIGIBLE_AGE",
    "I8_MAX",
    "I8_MIN",
    "U64_MAX",
    "add",
    "age_comparator",
    "greet",
    # Exports
    "EXPORTS",
    "ExportedFunction",
    "get_export",
    # Enums
    "OutputFormat",
    "OverflowPolicy",
    # Errors
    "ArithmeticOverflowError",
    "ConfigurationError",
    "OperandOutOfRangeError",
    "UnknownExportError",
]
