"""Interactive prompt abstraction for testing.

This module provides an ABC for asking the user questions so resolution
logic can be tested without a terminal.
"""

from abc import ABC, abstractmethod

from pmswitch.types import PackageManager


class Prompter(ABC):
    """Abstract interactive prompts for dependency injection."""

    @abstractmethod
    def select_package_manager(
        self, message: str, choices: list[PackageManager]
    ) -> PackageManager:
        """Ask the user to pick one package manager.

        Args:
            message: Question shown to the user
            choices: Package managers to choose from, in display order

        Returns:
            The selected package manager (always one of choices)
        """
        ...

    @abstractmethod
    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask the user a yes/no question.

        Args:
            message: Question shown to the user
            default: Answer used when the user just presses enter

        Returns:
            True if the user answered yes
        """
        ...
