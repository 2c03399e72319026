"""Terminal operations abstraction for testing.

This module provides an ABC for TTY detection so prompt gating can be
tested without relying on the actual terminal state.
"""

from abc import ABC, abstractmethod


class Terminal(ABC):
    """Abstract terminal operations for dependency injection."""

    @abstractmethod
    def is_stdin_interactive(self) -> bool:
        """Check if stdin is connected to an interactive terminal (TTY).

        Prompts are only shown when this returns True.

        Returns:
            True if stdin is a TTY, False otherwise
        """
        ...
