"""Exception hierarchy for pmswitch."""


class PmSwitchError(Exception):
    """Base class for all errors raised by pmswitch."""


class NoLockfileDetectedError(PmSwitchError):
    """Raised when detection finds no lockfile and the caller asked to fail.

    Callers that can continue without a lockfile pass throw_on_missing=False
    and receive NoLockfileSentinel instead.
    """

    def __init__(self, message: str = "No lockfile detected in the current directory") -> None:
        super().__init__(message)


class PackageManagerNotInstalledError(PmSwitchError):
    """Raised when the resolved package manager is not on PATH."""

    def __init__(self, package_manager: str) -> None:
        super().__init__(f"Package manager '{package_manager}' is not installed")
        self.package_manager = package_manager


class PackageManagerInstallError(PmSwitchError):
    """Raised when installing a missing package manager fails."""

    def __init__(self, package_manager: str, reason: str) -> None:
        super().__init__(f"Failed to install {package_manager}: {reason}")
        self.package_manager = package_manager
        self.reason = reason


class CommandExecutionError(PmSwitchError):
    """Raised when a package manager invocation exits with a non-zero code.

    Attributes:
        command: The literal command line that was run
        exit_code: The child process exit code
        stderr: Captured error output (empty when stderr was streamed)
    """

    def __init__(self, command: str, exit_code: int, stderr: str) -> None:
        message = f"Command '{command}' failed with exit code {exit_code}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr


class ConfigWriteError(PmSwitchError):
    """Raised when the per-user config file cannot be updated safely."""
