"""Real terminal implementation using sys.stdin.isatty()."""

import sys

from pmswitch.gateway.terminal.abc import Terminal


class RealTerminal(Terminal):
    """Production implementation using sys.stdin.isatty()."""

    def is_stdin_interactive(self) -> bool:
        # stdin may be closed or replaced when run from scripts
        if sys.stdin is None:
            return False
        return sys.stdin.isatty()
