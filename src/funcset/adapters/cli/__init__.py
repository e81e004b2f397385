"""CLI package: the console host for the exported functions.

Re-exports all public symbols from submodules for convenient access.

Contents:
    * Click context helpers and traceback state management from :mod:`.context`
    * Root command group from :mod:`.root`
    * Entry point from :mod:`.main`
    * All command functions from :mod:`.commands`
"""

from __future__ import annotations

from .commands import (
    cli_add,
    cli_age_comparator,
    cli_config,
    cli_exports,
    cli_greet,
    cli_info,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    # Context helpers
    "CLIContext",
    "get_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_add",
    "cli_age_comparator",
    "cli_config",
    "cli_exports",
    "cli_greet",
    "cli_info",
]
