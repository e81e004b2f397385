"""Module entry stories ensuring ``python -m funcset`` mirrors the console script."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from funcset import __init__conf__, entry
from funcset.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["funcset"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("funcset.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_runs_an_exported_function(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["funcset", "age-comparator", "18"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("funcset.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert capsys.readouterr().out == "Congrats You gained the Rights to Vote\n"


@pytest.mark.os_agnostic
def test_module_entry_formats_exceptions_via_exit_helpers(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["funcset", "--profile", "../escape", "info"], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("funcset.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code != 0
    assert "Traceback (most recent call last)" not in plain_err


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    expected_commands = {
        "cli_add",
        "cli_age_comparator",
        "cli_config",
        "cli_exports",
        "cli_greet",
        "cli_info",
    }
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_runs_add() -> None:
    """The real ``python -m funcset`` invocation path, out of process."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "funcset", "add", "2", "2"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "4"


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "funcset", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() is the console script behind the ``funcset`` command."""
    monkeypatch.setattr(sys, "argv", ["funcset", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out


@pytest.mark.os_agnostic
def test_entry_main_returns_range_error_on_failing_overflow(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(
        sys, "argv", ["funcset", "add", "--overflow", "fail", "18446744073709551615", "1"]
    )

    exit_code = entry.main()

    assert exit_code == 34
    assert "overflows u64" in capsys.readouterr().err
