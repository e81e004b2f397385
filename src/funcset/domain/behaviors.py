"""Pure domain functions with no I/O or framework dependencies.

These are the functions the package exports to its hosts. Each one is
stateless and side-effect free, so repeated calls with the same input always
produce the same result.
"""

from __future__ import annotations

from typing import Final

from .enums import OverflowPolicy
from .errors import ArithmeticOverflowError, OperandOutOfRangeError

#: Largest value representable by an unsigned 64-bit integer.
U64_MAX: Final[int] = 2**64 - 1

#: Signed 8-bit bounds used by hosts that pass ages across the boundary.
I8_MIN: Final[int] = -128
I8_MAX: Final[int] = 127

#: Age at which the comparison switches from "not eligible" to "eligible".
ELIGIBLE_AGE: Final[int] = 18

GREETING_TEMPLATE: Final[str] = "Hello, {name}!"
ELIGIBLE_TEMPLATE: Final[str] = "You are {age} Eligible To Vote"
NOT_ELIGIBLE_TEMPLATE: Final[str] = "You are {age} Not Eligible To Vote"
THRESHOLD_MESSAGE: Final[str] = "Congrats You gained the Rights to Vote"


def _require_u64(label: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandOutOfRangeError(f"{label}={value!r} is not an integer")
    if not 0 <= value <= U64_MAX:
        raise OperandOutOfRangeError(f"{label}={value} is outside the u64 range 0..{U64_MAX}")


def add(left: int, right: int, *, policy: OverflowPolicy | str = OverflowPolicy.WRAP) -> int:
    r"""Add two unsigned 64-bit integers.

    Sums that exceed :data:`U64_MAX` are resolved by ``policy``: wrap modulo
    2**64 (the default), clamp to :data:`U64_MAX`, or raise.

    Args:
        left: First operand, ``0 <= left <= U64_MAX``.
        right: Second operand, ``0 <= right <= U64_MAX``.
        policy: Overflow handling for sums above :data:`U64_MAX`, as a member
            or its lower-case value (``"wrap"``, ``"saturate"``, ``"fail"``).

    Returns:
        The sum, resolved according to ``policy``.

    Raises:
        OperandOutOfRangeError: If an operand is not an int, is negative, or is above U64_MAX.
        ValueError: If ``policy`` names no :class:`OverflowPolicy`.
        ArithmeticOverflowError: If the sum overflows and ``policy`` is FAIL.

    Example:
        >>> add(2, 2)
        4
        >>> add(U64_MAX, 1)
        0
        >>> add(U64_MAX, 1, policy=OverflowPolicy.SATURATE) == U64_MAX
        True
        >>> add(U64_MAX, 1, policy="saturate") == U64_MAX
        True
    """
    policy = OverflowPolicy(policy)
    _require_u64("left", left)
    _require_u64("right", right)
    total = left + right
    if total <= U64_MAX:
        return total
    if policy is OverflowPolicy.SATURATE:
        return U64_MAX
    if policy is OverflowPolicy.FAIL:
        raise ArithmeticOverflowError(f"{left} + {right} overflows u64")
    return total & U64_MAX


def greet(name: str) -> str:
    """Return ``"Hello, <name>!"`` for any name, including the empty string.

    Example:
        >>> greet("World")
        'Hello, World!'
        >>> greet("")
        'Hello, !'
    """
    return GREETING_TEMPLATE.format(name=name)


def age_comparator(age: int) -> str:
    """Describe voting eligibility for ``age`` against :data:`ELIGIBLE_AGE`.

    Reaching the threshold exactly is reported separately from being above it.
    Negative ages are not rejected and count as below the threshold.

    Example:
        >>> age_comparator(20)
        'You are 20 Eligible To Vote'
        >>> age_comparator(15)
        'You are 15 Not Eligible To Vote'
        >>> age_comparator(18)
        'Congrats You gained the Rights to Vote'
    """
    if age > ELIGIBLE_AGE:
        return ELIGIBLE_TEMPLATE.format(age=age)
    if age < ELIGIBLE_AGE:
        return NOT_ELIGIBLE_TEMPLATE.format(age=age)
    return THRESHOLD_MESSAGE


__all__ = [
    "ELIGIBLE_AGE",
    "ELIGIBLE_TEMPLATE",
    "GREETING_TEMPLATE",
    "I8_MAX",
    "I8_MIN",
    "NOT_ELIGIBLE_TEMPLATE",
    "THRESHOLD_MESSAGE",
    "U64_MAX",
    "add",
    "age_comparator",
    "greet",
]
