"""CLI commands that call the exported functions from the console host.

Contents:
    * :func:`cli_add` - Add two u64 operands under an overflow policy.
    * :func:`cli_greet` - Greet a name.
    * :func:`cli_age_comparator` - Report voting eligibility for an i8 age.
    * :func:`cli_exports` - List the exported function signatures.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from funcset.domain.behaviors import I8_MAX, I8_MIN, U64_MAX, add, age_comparator, greet
from funcset.domain.enums import OutputFormat, OverflowPolicy
from funcset.domain.errors import ArithmeticOverflowError, ConfigurationError, UnknownExportError
from funcset.domain.exports import EXPORTS, ExportedFunction, get_export

from ..constants import CLICK_CONTEXT_SETTINGS, SIGNED_ARGUMENT_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _resolve_overflow_policy(cli_ctx: CLIContext, requested: str | None) -> OverflowPolicy:
    """Pick the ``--overflow`` option, else ``[functions] overflow_policy``.

    Raises:
        SystemExit: With CONFIG_ERROR when the configured policy is invalid.
    """
    if requested:
        return OverflowPolicy(requested.lower())
    try:
        functions_config = cli_ctx.services.load_functions_config_from_dict(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid functions configuration", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return functions_config.overflow_policy


@click.command("add", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("left", type=click.IntRange(0, U64_MAX))
@click.argument("right", type=click.IntRange(0, U64_MAX))
@click.option(
    "--overflow",
    type=click.Choice([policy.value for policy in OverflowPolicy], case_sensitive=False),
    default=None,
    help="Overflow policy for this call (default: [functions] overflow_policy)",
)
@click.pass_context
def cli_add(ctx: click.Context, left: int, right: int, overflow: str | None) -> None:
    """Print LEFT + RIGHT as unsigned 64-bit integers.

    Sums above 18446744073709551615 wrap around, saturate, or fail depending
    on the overflow policy. A failing overflow exits with code 34.
    """
    cli_ctx = get_cli_context(ctx)
    policy = _resolve_overflow_policy(cli_ctx, overflow)

    with lib_log_rich.runtime.bind(job_id="cli-add", extra={"command": "add", "policy": policy.value}):
        logger.info("Adding operands", extra={"left": left, "right": right})
        try:
            total = add(left, right, policy=policy)
        except ArithmeticOverflowError as exc:
            logger.warning("Addition overflowed", extra={"left": left, "right": right})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.RANGE_ERROR) from exc
        click.echo(total)


@click.command("greet", context_settings=SIGNED_ARGUMENT_CONTEXT_SETTINGS)
@click.argument("name")
def cli_greet(name: str) -> None:
    """Print "Hello, NAME!".

    NAME may start with a dash. Put ``--`` before names such as ``-h`` that
    collide with an option of this command.
    """
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        logger.info("Greeting", extra={"name_length": len(name)})
        click.echo(greet(name))


@click.command("age-comparator", context_settings=SIGNED_ARGUMENT_CONTEXT_SETTINGS)
@click.argument("age", type=click.IntRange(I8_MIN, I8_MAX))
def cli_age_comparator(age: int) -> None:
    """Report whether AGE (-128..127) is eligible to vote."""
    with lib_log_rich.runtime.bind(job_id="cli-age-comparator", extra={"command": "age-comparator"}):
        logger.info("Comparing age against threshold", extra={"age": age})
        click.echo(age_comparator(age))


def _render_exports(entries: list[ExportedFunction], fmt: OutputFormat) -> str:
    if fmt is OutputFormat.JSON:
        return orjson.dumps([entry.describe() for entry in entries], option=orjson.OPT_INDENT_2).decode()
    width = max(len(entry.signature) for entry in entries)
    return "\n".join(f"{entry.signature.ljust(width)}  {entry.summary}" for entry in entries)


@click.command("exports", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
def cli_exports(name: str | None, output_format: str) -> None:
    """List the exported functions, or only NAME, with their host signatures."""
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="cli-exports", extra={"command": "exports", "format": fmt.value}):
        logger.info("Listing exports", extra={"name": name})
        try:
            entries = [get_export(name)] if name else list(EXPORTS.values())
        except UnknownExportError as exc:
            logger.warning("Unknown export requested", extra={"name": name})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(_render_exports(entries, fmt))


__all__ = ["cli_add", "cli_age_comparator", "cli_exports", "cli_greet"]
