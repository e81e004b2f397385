"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Exported-function commands from :mod:`.functions`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .functions import cli_add, cli_age_comparator, cli_exports, cli_greet
from .info import cli_info

__all__ = [
    "cli_add",
    "cli_age_comparator",
    "cli_config",
    "cli_exports",
    "cli_greet",
    "cli_info",
]
