"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Raised when a configuration section cannot be parsed into its model.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> err = ConfigurationError("Unknown overflow policy 'clamp'")
        >>> str(err)
        "Unknown overflow policy 'clamp'"
    """


class OperandOutOfRangeError(ValueError):
    """An ``add`` operand does not fit into an unsigned 64-bit integer.

    Example:
        >>> isinstance(OperandOutOfRangeError("left=-1"), ValueError)
        True
    """


class ArithmeticOverflowError(OverflowError):
    """A sum exceeded the u64 range while the ``fail`` policy was active.

    Inherits from OverflowError so generic arithmetic handlers still catch it.

    Example:
        >>> err = ArithmeticOverflowError("18446744073709551615 + 1 overflows u64")
        >>> isinstance(err, OverflowError)
        True
    """


class UnknownExportError(LookupError):
    """A host asked for a function name that is not exported.

    Example:
        >>> err = UnknownExportError("No exported function named 'multiply'")
        >>> isinstance(err, LookupError)
        True
    """


__all__ = [
    "ArithmeticOverflowError",
    "ConfigurationError",
    "OperandOutOfRangeError",
    "UnknownExportError",
]
