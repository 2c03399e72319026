"""No-op process runner for dry-run mode.

This module provides a process runner that prevents actual command execution
while printing what would have been done.
"""

from pmswitch.gateway.process.abc import ProcessResult, ProcessRunner
from pmswitch.output import user_output


class DryRunProcessRunner(ProcessRunner):
    """No-op wrapper that prevents package manager execution in dry-run mode.

    Lookups are read-only and are delegated to the wrapped runner. Runs are
    mutations, so they print what would happen and report success.
    """

    def __init__(self, wrapped: ProcessRunner) -> None:
        """Create a dry-run wrapper around a ProcessRunner implementation.

        Args:
            wrapped: The ProcessRunner implementation to wrap
        """
        self._wrapped = wrapped

    def is_installed(self, executable: str) -> bool:
        return self._wrapped.is_installed(executable)

    def run(self, executable: str, argv: list[str]) -> ProcessResult:
        cmd_str = " ".join([executable, *argv])
        user_output(f"[DRY RUN] Would run: {cmd_str}")
        return ProcessResult(returncode=0, stderr="")
