"""Fake Terminal implementation for testing.

FakeTerminal is an in-memory implementation that returns a configurable
interactive state, enabling fast and deterministic tests.
"""

from pmswitch.gateway.terminal.abc import Terminal


class FakeTerminal(Terminal):
    """In-memory fake implementation that returns configured state.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, is_interactive: bool) -> None:
        """Create FakeTerminal with configured TTY state.

        Args:
            is_interactive: Whether to report stdin as interactive (TTY)
        """
        self._is_interactive = is_interactive

    def is_stdin_interactive(self) -> bool:
        return self._is_interactive
