"""Run the console host and turn every outcome into a process exit code.

Contents:
    * :func:`main` - Shared by the ``funcset`` console script and ``python -m funcset``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from funcset import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState, apply_traceback_preferences
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from funcset.composition import AppServices


def _exit_code_from_system_exit(exc: SystemExit) -> int:
    """Translate ``SystemExit.code`` the way the interpreter does."""
    code = exc.code
    if code is None:
        return ExitCode.SUCCESS
    if isinstance(code, int):
        return int(code)
    click.echo(code, err=True)
    return ExitCode.GENERAL_ERROR


def _report_unexpected(exc: BaseException) -> int:
    verbose = TracebackState.current().enabled
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    """Call the root group without Click's standalone exit handling.

    Commands report their own failures and then raise ``SystemExit`` with an
    exit code; those codes pass through untouched. Anything else reaching this
    boundary is printed by lib_cli_exit_tools.
    """
    from .root import cli

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return _exit_code_from_system_exit(exc)
    except BaseException as exc:  # noqa: BLE001 - KeyboardInterrupt included
        return _report_unexpected(exc)
    return ExitCode.SUCCESS


def _shutdown_logging() -> None:
    # Other threads may still log through the shared runtime.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``funcset`` and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back to what they were before the run.
        services_factory: Callable returning AppServices, usually ``build_production``.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from funcset.composition import build_production
        >>> main(["greet", "World"], services_factory=build_production)  # doctest: +SKIP
        Hello, World!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(sys.argv[1:] if argv is None else argv)
    flags_before = TracebackState.current()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            flags_before.install()
        _shutdown_logging()


__all__ = ["main"]
