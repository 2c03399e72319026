"""Fake Prompter implementation for testing.

FakePrompter replays answers given at construction time and records every
question asked, enabling deterministic tests of interactive flows.
"""

from pmswitch.gateway.prompter.abc import Prompter
from pmswitch.types import PackageManager


class FakePrompter(Prompter):
    """In-memory fake implementation with scripted answers.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        selections: list[PackageManager] | None = None,
        confirmations: list[bool] | None = None,
    ) -> None:
        """Create FakePrompter with scripted answers.

        Args:
            selections: Answers returned by successive select_package_manager calls
            confirmations: Answers returned by successive confirm calls
        """
        self._selections = list(selections) if selections is not None else []
        self._confirmations = list(confirmations) if confirmations is not None else []
        self._selection_prompts: list[tuple[str, list[PackageManager]]] = []
        self._confirm_prompts: list[str] = []

    @property
    def selection_prompts(self) -> list[tuple[str, list[PackageManager]]]:
        """Get (message, choices) for every selection prompt shown.

        This property is for test assertions only.
        """
        return list(self._selection_prompts)

    @property
    def confirm_prompts(self) -> list[str]:
        """Get the message of every confirmation prompt shown.

        This property is for test assertions only.
        """
        return list(self._confirm_prompts)

    def select_package_manager(
        self, message: str, choices: list[PackageManager]
    ) -> PackageManager:
        self._selection_prompts.append((message, list(choices)))
        if not self._selections:
            raise AssertionError(f"Unexpected selection prompt: {message}")
        answer = self._selections.pop(0)
        if answer not in choices:
            raise AssertionError(f"Scripted answer {answer!r} is not one of {choices}")
        return answer

    def confirm(self, message: str, *, default: bool) -> bool:
        self._confirm_prompts.append(message)
        if not self._confirmations:
            raise AssertionError(f"Unexpected confirmation prompt: {message}")
        return self._confirmations.pop(0)
