"""Resolution of the package manager for one invocation.

Combines an optional forced choice, lockfile detection, configuration and
(when allowed) interactive prompts into a single package manager:

    forced?  -> use it
    detect   -> several lockfiles: prompt, else priority, else first detected
             -> one lockfile: use it
             -> none: configured default, else prompt (and offer to save it),
                else the baseline manager with a warning

After resolution, ensure_installed() verifies the executable exists and
installs it when configured or confirmed.

This module never prints or logs; callers present the Resolution.
"""

from pathlib import Path

from pmswitch.detector import get_all_detected, is_installed
from pmswitch.errors import PackageManagerNotInstalledError
from pmswitch.executor import install_package_manager
from pmswitch.gateway.config_store.abc import ConfigStore
from pmswitch.gateway.process.abc import ProcessRunner
from pmswitch.gateway.prompter.abc import Prompter
from pmswitch.package_managers import BASELINE_PACKAGE_MANAGER
from pmswitch.types import ALL_PACKAGE_MANAGERS, PackageManager, PmSwitchConfig, Resolution

MULTIPLE_LOCKFILES_MESSAGE = (
    "Multiple lockfiles detected. Which package manager would you like to use?"
)
NO_LOCKFILE_MESSAGE = "No lockfile detected. Which package manager would you like to use?"
FALLBACK_WARNING = (
    f"No lockfile detected and no default package manager configured. "
    f"Using {BASELINE_PACKAGE_MANAGER}."
)


def _choose_among_detected(
    detected: list[PackageManager],
    *,
    config: PmSwitchConfig,
    interactive: bool,
    prompter: Prompter,
) -> Resolution:
    if interactive:
        chosen = prompter.select_package_manager(MULTIPLE_LOCKFILES_MESSAGE, detected)
        return Resolution(package_manager=chosen, source="prompt", detected=tuple(detected))

    for pm in config.priority:
        if pm in detected:
            return Resolution(package_manager=pm, source="priority", detected=tuple(detected))

    return Resolution(package_manager=detected[0], source="detected", detected=tuple(detected))


def _choose_without_lockfile(
    *,
    config: PmSwitchConfig,
    interactive: bool,
    prompter: Prompter,
    config_store: ConfigStore,
) -> Resolution:
    if config.default_package_manager is not None:
        return Resolution(
            package_manager=config.default_package_manager, source="default", detected=()
        )

    if interactive:
        chosen = prompter.select_package_manager(NO_LOCKFILE_MESSAGE, list(ALL_PACKAGE_MANAGERS))
        save_message = f"Would you like to save {chosen} as your default package manager?"
        saved = prompter.confirm(save_message, default=False)
        if saved:
            config_store.set_default_package_manager(chosen)
        return Resolution(
            package_manager=chosen, source="prompt", detected=(), saved_as_default=saved
        )

    return Resolution(
        package_manager=BASELINE_PACKAGE_MANAGER,
        source="fallback",
        detected=(),
        warning=FALLBACK_WARNING,
    )


def resolve_package_manager(
    *,
    cwd: Path,
    config: PmSwitchConfig,
    forced: PackageManager | None,
    interactive: bool,
    prompter: Prompter,
    config_store: ConfigStore,
) -> Resolution:
    """Decide which package manager should run the user's command.

    Args:
        cwd: Project directory to detect lockfiles in
        config: Configuration loaded for this invocation
        forced: Package manager forced on the command line, if any
        interactive: Whether prompts may be shown. Callers combine
            config.interactive, --no-interactive and TTY detection.
        prompter: Prompt gateway used when interactive
        config_store: Used to persist a default chosen interactively

    Returns:
        Resolution describing the chosen manager and how it was chosen
    """
    if forced is not None:
        return Resolution(package_manager=forced, source="forced", detected=())

    # An empty result is the "no lockfile" case; it is not an error here
    detected = get_all_detected(cwd)

    if len(detected) > 1:
        return _choose_among_detected(
            detected, config=config, interactive=interactive, prompter=prompter
        )

    if len(detected) == 1:
        return Resolution(package_manager=detected[0], source="detected", detected=tuple(detected))

    return _choose_without_lockfile(
        config=config, interactive=interactive, prompter=prompter, config_store=config_store
    )


def ensure_installed(
    package_manager: PackageManager,
    *,
    config: PmSwitchConfig,
    interactive: bool,
    runner: ProcessRunner,
    prompter: Prompter,
) -> bool:
    """Make sure a package manager's executable is available.

    Installs it with the baseline manager when config.auto_install is set or
    the user confirms interactively.

    Returns:
        True if an installation was performed, False if it was already installed

    Raises:
        PackageManagerNotInstalledError: If missing and installation was not allowed
        PackageManagerInstallError: If the installation itself failed
    """
    if is_installed(package_manager, runner):
        return False

    should_install = config.auto_install or (
        interactive
        and prompter.confirm(
            f"{package_manager} is not installed. Would you like to install it globally?",
            default=True,
        )
    )
    if not should_install:
        raise PackageManagerNotInstalledError(package_manager)

    install_package_manager(package_manager, runner)
    return True
