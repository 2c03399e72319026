"""Real Prompter implementation using click prompts."""

import click

from pmswitch.gateway.prompter.abc import Prompter
from pmswitch.output import user_output
from pmswitch.types import PackageManager, parse_package_manager


class ClickPrompter(Prompter):
    """Production implementation that prompts on the controlling terminal."""

    def select_package_manager(
        self, message: str, choices: list[PackageManager]
    ) -> PackageManager:
        if not choices:
            raise ValueError("No package managers provided for selection")
        if len(choices) == 1:
            return choices[0]

        user_output(message)
        for index, choice in enumerate(choices, start=1):
            user_output(f"  {index}. {choice}")

        answer = click.prompt(
            "Package manager",
            type=click.Choice([*choices, *(str(i) for i in range(1, len(choices) + 1))]),
            default=choices[0],
            show_choices=False,
            err=True,
        )
        if answer.isdigit():
            return choices[int(answer) - 1]

        selected = parse_package_manager(answer)
        # click.Choice guarantees a listed value
        assert selected is not None, answer
        return selected

    def confirm(self, message: str, *, default: bool) -> bool:
        return click.confirm(message, default=default, err=True)
