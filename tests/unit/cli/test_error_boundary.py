"""Tests for the CLI error boundary."""

from dataclasses import replace

import pytest

from pmswitch.cli.error_boundary import cli_error_boundary, exit_code_for
from pmswitch.context import PmsContext
from pmswitch.errors import (
    CommandExecutionError,
    PackageManagerNotInstalledError,
    PmSwitchError,
)


def test_exit_code_for_command_failure_uses_child_code() -> None:
    assert exit_code_for(CommandExecutionError("npm test", 5, "")) == 5


def test_exit_code_for_unknown_child_code_is_1() -> None:
    assert exit_code_for(CommandExecutionError("npm test", 0, "")) == 1
    assert exit_code_for(CommandExecutionError("npm test", -9, "")) == 1


def test_exit_code_for_other_errors_is_1() -> None:
    assert exit_code_for(PackageManagerNotInstalledError("bun")) == 1


def test_boundary_prints_error_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    @cli_error_boundary
    def failing(ctx: PmsContext) -> None:
        raise PmSwitchError("something broke")

    with pytest.raises(SystemExit) as exc_info:
        failing(PmsContext.for_test())

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Error: something broke" in err
    assert "Traceback" not in err


def test_boundary_prints_traceback_in_debug_mode(capsys: pytest.CaptureFixture[str]) -> None:
    @cli_error_boundary
    def failing(ctx: PmsContext) -> None:
        raise PmSwitchError("something broke")

    with pytest.raises(SystemExit):
        failing(replace(PmsContext.for_test(), debug=True))

    err = capsys.readouterr().err
    assert "Traceback (most recent call last)" in err
    assert "Error: something broke" in err


def test_boundary_lets_unrelated_errors_through() -> None:
    @cli_error_boundary
    def failing(ctx: PmsContext) -> None:
        raise KeyError("x")

    with pytest.raises(KeyError):
        failing(PmsContext.for_test())
