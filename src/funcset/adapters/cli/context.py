"""State shared between the root group and its subcommands.

Contents:
    * :class:`CLIContext` - What the root group resolved (config, services, overrides).
    * :class:`TracebackState` - The two lib_cli_exit_tools traceback flags as a value.
    * :func:`get_cli_context` - Typed access to :class:`CLIContext` from a Click context.
    * :func:`apply_traceback_preferences` - Turn full tracebacks on or off.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from funcset.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from funcset.composition import AppServices


class TracebackState(NamedTuple):
    """Traceback flags of ``lib_cli_exit_tools.config``.

    Example:
        >>> TracebackState(True, True).install()
        >>> TracebackState.current()
        TracebackState(enabled=True, force_color=True)
        >>> TracebackState().install()
    """

    enabled: bool = False
    force_color: bool = False

    @classmethod
    def current(cls) -> TracebackState:
        settings = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(settings, "traceback", False)),
            force_color=bool(getattr(settings, "traceback_force_color", False)),
        )

    def install(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def apply_traceback_preferences(enabled: bool) -> None:
    """Full coloured tracebacks when ``enabled``, short summaries otherwise."""
    TracebackState(enabled=bool(enabled), force_color=bool(enabled)).install()


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group resolved before a subcommand runs.

    ``set_overrides`` keeps the raw ``--set`` strings so that a subcommand
    loading another profile ends up with the same overrides on top.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def config_for(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the configuration for ``profile`` and the profile it came from.

        ``None`` (or the root profile itself) reuses the already loaded config.
        """
        if not profile or profile == self.profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group stored on ``ctx.obj``.

    Raises:
        RuntimeError: When a subcommand is invoked without the root group.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).profile is None
        True
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError(f"CLI context missing (found {type(state).__name__}); the root group must run first.")


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
]
