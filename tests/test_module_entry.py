"""Module entry stories ensuring `python -m hyperup` mirrors the CLI."""

from __future__ import annotations

import os
import runpy
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import lib_cli_exit_tools
import pytest

from hyperup import __init__conf__, entry
from hyperup.adapters import cli as cli_mod
from hyperup.domain.behaviors import CANONICAL_OUTPUT


def _run_subprocess(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    """Run ``python -m hyperup`` with ``args`` and capture text output."""
    return subprocess.run(  # noqa: S603
        [sys.executable, "-m", "hyperup", *args],
        capture_output=True,
        env=env,
        timeout=30,
        check=False,
        # rich-click writes Unicode that cp1252 cannot decode on Windows
        encoding="utf-8",
        errors="replace",
    )


@pytest.mark.os_agnostic
def test_module_entry_prints_the_canonical_line(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args prints one line and exits 0."""
    monkeypatch.setattr(sys, "argv", ["hyperup"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("hyperup.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert capsys.readouterr().out == f"{CANONICAL_OUTPUT}\n"


@pytest.mark.os_agnostic
def test_module_entry_formats_exceptions_via_exit_helpers(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    exploding_chain: str,
) -> None:
    """Exceptions during module entry are formatted by lib_cli_exit_tools."""
    monkeypatch.setattr(sys, "argv", ["hyperup", "run", "-e", "!"], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("hyperup.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code != 0
    assert exploding_chain in plain_err


@pytest.mark.os_agnostic
def test_module_entry_traceback_flag_prints_full_traceback(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    exploding_chain: str,
) -> None:
    """--traceback via module entry prints complete traceback on error."""
    monkeypatch.setattr(sys, "argv", ["hyperup", "--traceback", "run", "-e", "!"])
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("hyperup.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exc.value.code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert f"RuntimeError: {exploding_chain}" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """CLI facade exports all registered commands."""
    expected_commands = {
        "cli_config",
        "cli_config_generate_examples",
        "cli_info",
        "cli_run",
    }
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_prints_exactly_one_line() -> None:
    """`python -m hyperup` writes the canonical line and nothing else to stdout."""
    result = _run_subprocess()

    assert result.returncode == 0
    assert result.stdout.splitlines() == [CANONICAL_OUTPUT]


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """Verify `python -m hyperup --help` works via subprocess."""
    result = _run_subprocess("--help")

    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """Verify `python -m hyperup --version` outputs version."""
    result = _run_subprocess("--version")

    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_runs_the_chain(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services for the console script."""
    monkeypatch.setattr(sys, "argv", ["hyperup", "run", "lua"])

    exit_code = entry.main()

    assert exit_code == 0
    assert capsys.readouterr().out == "lua rocks, you all!\n"


@pytest.mark.os_agnostic
def test_entry_main_returns_nonzero_on_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    exploding_chain: str,
) -> None:
    """entry.main() returns non-zero exit code on CLI errors."""
    monkeypatch.setattr(sys, "argv", ["hyperup", "run", "-e", "!"])
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False)

    exit_code = entry.main()

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert exploding_chain in plain_err


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("variable", "value"),
    [
        ("HYPERUP___HYPERUP__INPUT", "lua"),
        ("HYPERUP___HYPERUP__ENDINGS", "42"),
    ],
)
def test_module_entry_subprocess_line_ignores_chain_environment(
    tmp_path: Path,
    variable: str,
    value: str,
) -> None:
    """Environment overrides of [hyperup] never change the bare line or its exit code."""
    env = {**os.environ, "HOME": str(tmp_path), "XDG_CONFIG_HOME": str(tmp_path / ".config"), variable: value}

    result = _run_subprocess(env=env)

    assert result.returncode == 0
    assert result.stdout == f"{CANONICAL_OUTPUT}\n"


@pytest.mark.os_agnostic
def test_module_entry_subprocess_run_still_honours_chain_environment(tmp_path: Path) -> None:
    """The explicit run subcommand keeps reading the layered [hyperup] section."""
    env = {
        **os.environ,
        "HOME": str(tmp_path),
        "XDG_CONFIG_HOME": str(tmp_path / ".config"),
        "HYPERUP___HYPERUP__INPUT": "lua",
    }

    result = _run_subprocess("run", env=env)

    assert result.returncode == 0
    assert result.stdout == "lua rocks, you all!\n"
