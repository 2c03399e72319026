"""User-facing output helpers.

Diagnostics go to stderr so that stdout belongs to the package manager
being proxied.
"""

import click

from pmswitch.package_managers import get_traits
from pmswitch.types import PackageManager


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a message for the user to stderr."""
    click.echo(message, err=True, nl=nl)


def style_package_manager(package_manager: PackageManager) -> str:
    """Return the package manager name styled with its color."""
    return click.style(package_manager, fg=get_traits(package_manager).color, bold=True)


def style_command(package_manager: PackageManager, command_line: str) -> str:
    """Return a command line styled with its package manager's color."""
    return click.style(command_line, fg=get_traits(package_manager).color)


def style_error(message: str) -> str:
    """Prefix a message with a red 'Error: ' label."""
    return click.style("Error: ", fg="red") + message


def style_warning(message: str) -> str:
    """Prefix a message with a yellow 'Warning: ' label."""
    return click.style("Warning: ", fg="yellow") + message
