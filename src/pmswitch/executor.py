"""Execution of translated command plans."""

from collections.abc import Callable

from pmswitch.detector import is_installed
from pmswitch.errors import (
    CommandExecutionError,
    PackageManagerInstallError,
    PackageManagerNotInstalledError,
)
from pmswitch.gateway.process.abc import ProcessRunner
from pmswitch.package_managers import BASELINE_PACKAGE_MANAGER
from pmswitch.types import CommandPlan, Invocation, PackageManager


def execute(
    invocation: Invocation, runner: ProcessRunner, *, check_installed: bool = False
) -> None:
    """Run one invocation, streaming its output.

    Args:
        invocation: The package manager and argv to run
        runner: Process gateway used to spawn the child
        check_installed: Verify the executable exists first. Callers that
            already ran the install check pass False.

    Raises:
        PackageManagerNotInstalledError: If check_installed and the executable is missing
        CommandExecutionError: If the child exits with a non-zero code
    """
    if check_installed and not is_installed(invocation.package_manager, runner):
        raise PackageManagerNotInstalledError(invocation.package_manager)

    result = runner.run(invocation.package_manager, list(invocation.argv))
    if result.returncode != 0:
        raise CommandExecutionError(invocation.command_line, result.returncode, result.stderr)


def execute_plan(
    plan: CommandPlan,
    runner: ProcessRunner,
    *,
    on_step: Callable[[Invocation], None] | None = None,
) -> None:
    """Run every step of a plan in order.

    Each step finishes before the next starts. The first failure propagates
    and the remaining steps are skipped, so a failed ephemeral execute leaves
    its temporary dev dependency installed.

    Args:
        plan: Steps to run
        runner: Process gateway used to spawn each child
        on_step: Called with each invocation just before it runs

    Raises:
        CommandExecutionError: From the first step that exits non-zero
    """
    for step in plan.steps:
        if on_step is not None:
            on_step(step)
        execute(step, runner)


def install_package_manager(package_manager: PackageManager, runner: ProcessRunner) -> None:
    """Install a package manager globally using the baseline manager.

    Raises:
        PackageManagerNotInstalledError: If the baseline manager itself is missing
        PackageManagerInstallError: If the global install fails
    """
    invocation = Invocation(BASELINE_PACKAGE_MANAGER, ("install", "-g", package_manager))
    try:
        execute(invocation, runner, check_installed=True)
    except CommandExecutionError as e:
        raise PackageManagerInstallError(package_manager, str(e)) from e
