"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values instead
of a bare ``1``, so scripts driving the host can tell failures apart.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by the ``funcset`` console host.

    Values follow errno and sysexits.h conventions:

    * 0–1: generic success / failure
    * 2: command-line usage error (raised by Click itself)
    * 22: EINVAL, e.g. an unknown export or configuration section
    * 34: ERANGE, an ``add`` overflow under the ``fail`` policy
    * 78: EX_CONFIG (sysexits.h)

    Example:
        >>> int(ExitCode.RANGE_ERROR)
        34
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    RANGE_ERROR = 34
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
