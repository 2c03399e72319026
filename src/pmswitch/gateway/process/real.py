"""Real ProcessRunner implementation using subprocess."""

import logging
import subprocess
import sys

from pmswitch.gateway.process.abc import ProcessResult, ProcessRunner

logger = logging.getLogger(__name__)

# Conventional shell exit code for "command not found"
COMMAND_NOT_FOUND_EXIT_CODE = 127


def lookup_command(executable: str) -> list[str]:
    """Build the platform's executable lookup command.

    Uses `where` on Windows and `which` everywhere else.
    """
    if sys.platform == "win32":
        return ["where", executable]
    return ["which", executable]


class RealProcessRunner(ProcessRunner):
    """Production implementation that spawns real child processes."""

    def is_installed(self, executable: str) -> bool:
        cmd = lookup_command(executable)
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except (OSError, subprocess.SubprocessError) as e:
            # The lookup tool itself is missing or could not be started
            logger.debug("Lookup %s failed: %s", cmd, e)
            return False
        return result.returncode == 0

    def run(self, executable: str, argv: list[str]) -> ProcessResult:
        cmd = [executable, *argv]
        logger.debug("Running %s", cmd)
        try:
            # stdout/stderr are inherited so the child's output streams through
            result = subprocess.run(cmd, check=False)
        except FileNotFoundError as e:
            return ProcessResult(returncode=COMMAND_NOT_FOUND_EXIT_CODE, stderr=str(e))
        return ProcessResult(returncode=result.returncode, stderr="")
