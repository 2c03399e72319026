"""Programmatic entry point for running commands through pmswitch.

Unlike the CLI, run() never prompts and never prints beyond what the
package manager itself writes:

    from pmswitch.api import run

    run("add", ["react"], cwd=project_dir)
"""

from collections.abc import Sequence
from pathlib import Path

from pmswitch.commands import translate_command
from pmswitch.detector import detect_package_manager
from pmswitch.errors import PmSwitchError
from pmswitch.executor import execute_plan
from pmswitch.gateway.config_store.abc import ConfigStore
from pmswitch.gateway.config_store.real import RealConfigStore
from pmswitch.gateway.process.abc import ProcessRunner
from pmswitch.gateway.process.real import RealProcessRunner
from pmswitch.gateway.prompter.abc import Prompter
from pmswitch.resolution import ensure_installed
from pmswitch.types import ALL_PACKAGE_MANAGERS, NoLockfileSentinel, PackageManager


class _NoPrompts(Prompter):
    """Prompter for non-interactive use; reaching it is a programming error."""

    def select_package_manager(
        self, message: str, choices: list[PackageManager]
    ) -> PackageManager:
        raise RuntimeError(f"Prompt not allowed in non-interactive mode: {message}")

    def confirm(self, message: str, *, default: bool) -> bool:
        raise RuntimeError(f"Prompt not allowed in non-interactive mode: {message}")


def run(
    command: str,
    args: Sequence[str] = (),
    cwd: Path | None = None,
    *,
    runner: ProcessRunner | None = None,
    config_store: ConfigStore | None = None,
) -> PackageManager:
    """Run a command with the package manager detected in a directory.

    Lockfiles are checked in the configured priority order (managers missing
    from it are checked last); without one, the configured default is used.
    A missing package manager is installed only when auto-install is
    configured.

    Args:
        command: Abstract command name, e.g. "install", "exec", "build"
        args: Arguments passed through verbatim
        cwd: Project directory. Defaults to the current working directory.
        runner: Process gateway. Defaults to RealProcessRunner.
        config_store: Config gateway. Defaults to RealConfigStore.

    Returns:
        The package manager that ran the command

    Raises:
        PmSwitchError: If no lockfile is found and no default is configured,
            or any error raised while installing or executing
    """
    project_dir = cwd if cwd is not None else Path.cwd()
    process_runner = runner if runner is not None else RealProcessRunner()
    store = config_store if config_store is not None else RealConfigStore()

    config = store.load(project_dir).config
    detection_order = (
        *config.priority,
        *(pm for pm in ALL_PACKAGE_MANAGERS if pm not in config.priority),
    )
    detected = detect_package_manager(project_dir, detection_order, throw_on_missing=False)

    if not isinstance(detected, NoLockfileSentinel):
        package_manager = detected
    elif config.default_package_manager is not None:
        package_manager = config.default_package_manager
    else:
        raise PmSwitchError(f"{detected.message} and no default package manager is configured")

    ensure_installed(
        package_manager,
        config=config,
        interactive=False,
        runner=process_runner,
        prompter=_NoPrompts(),
    )
    execute_plan(translate_command(command, list(args), package_manager), process_runner)
    return package_manager
