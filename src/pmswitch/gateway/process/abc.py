"""Process operations abstraction for testing.

This module provides an ABC for locating and running package manager
executables so tests never spawn real processes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished child process.

    Attributes:
        returncode: Exit code of the child process
        stderr: Captured error output. Empty when stderr was streamed to the
            parent process rather than captured.
    """

    returncode: int
    stderr: str


class ProcessRunner(ABC):
    """Abstract process operations for dependency injection."""

    @abstractmethod
    def is_installed(self, executable: str) -> bool:
        """Check whether an executable can be found on PATH.

        Never raises: a failing lookup is reported as not installed.

        Args:
            executable: Name of the executable (e.g. "pnpm")

        Returns:
            True if the executable was found, False otherwise
        """
        ...

    @abstractmethod
    def run(self, executable: str, argv: list[str]) -> ProcessResult:
        """Run an executable to completion with inherited stdio.

        Args:
            executable: Name of the executable to run
            argv: Arguments passed after the executable name

        Returns:
            ProcessResult describing how the process exited
        """
        ...
