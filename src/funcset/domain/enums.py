"""Type-safe domain enums for overflow handling and output formats."""

from __future__ import annotations

from enum import Enum


class OverflowPolicy(str, Enum):
    """How :func:`~funcset.domain.behaviors.add` resolves sums above u64.

    Inherits from str so values load directly from configuration files and
    work as Click choices.

    Attributes:
        WRAP: Wrap around modulo 2**64 (the default).
        SATURATE: Clamp to the largest u64 value.
        FAIL: Raise :class:`~funcset.domain.errors.ArithmeticOverflowError`.

    Example:
        >>> OverflowPolicy("saturate") is OverflowPolicy.SATURATE
        True
        >>> OverflowPolicy.WRAP == "wrap"
        True
    """

    WRAP = "wrap"
    SATURATE = "saturate"
    FAIL = "fail"


class OutputFormat(str, Enum):
    """Output format options for configuration and export listings.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OutputFormat",
    "OverflowPolicy",
]
