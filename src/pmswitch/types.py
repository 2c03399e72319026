"""Core data types shared across pmswitch.

This module provides:
- PackageManager: The closed set of supported package managers
- NoLockfileSentinel: Sentinel for "no lockfile found" detection results
- PmSwitchConfig: Merged user + project configuration
- Invocation / CommandPlan: Translated subprocess invocations
- Resolution: The outcome of choosing a package manager
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

PackageManager = Literal["pnpm", "bun", "yarn", "npm"]

# Canonical order. Used whenever a deterministic listing of managers is needed
# (interactive choices, "all detected" results).
ALL_PACKAGE_MANAGERS: tuple[PackageManager, ...] = ("pnpm", "bun", "yarn", "npm")

# How the resolution engine arrived at its answer:
# - "forced": an explicit --force flag
# - "detected": the only lockfile present (or first in canonical order)
# - "prompt": the user picked interactively
# - "priority": several lockfiles, tie broken by the priority order
# - "default": no lockfile, configured default used
# - "fallback": no lockfile and nothing configured, baseline manager used
ResolutionSource = Literal["forced", "detected", "prompt", "priority", "default", "fallback"]


def parse_package_manager(value: str) -> PackageManager | None:
    """Parse a user-supplied package manager name.

    Args:
        value: Name as typed by the user or read from a config file

    Returns:
        The matching PackageManager, or None if the name is not supported
    """
    normalized = value.strip().lower()
    for pm in ALL_PACKAGE_MANAGERS:
        if pm == normalized:
            return pm
    return None


@dataclass(frozen=True)
class NoLockfileSentinel:
    """Sentinel value indicating that no recognized lockfile was found.

    Returned by detection when the caller asked not to raise, so "no
    preference" can be told apart from a detected manager without
    exception handling.
    """

    message: str = "No lockfile detected in the current directory"


@dataclass(frozen=True)
class PmSwitchConfig:
    """In-memory representation of merged built-in, user and project config."""

    default_package_manager: PackageManager | None
    priority: tuple[PackageManager, ...]
    interactive: bool
    auto_install: bool


@dataclass(frozen=True)
class Invocation:
    """A single fully-translated package manager invocation.

    Attributes:
        package_manager: Executable to run
        argv: Arguments passed after the executable name (never empty)
    """

    package_manager: PackageManager
    argv: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.argv:
            raise ValueError(f"Invocation of {self.package_manager} requires at least one argument")

    @property
    def command_line(self) -> str:
        """Human-readable command line, e.g. 'yarn add react'."""
        return " ".join((self.package_manager, *self.argv))


@dataclass(frozen=True)
class CommandPlan:
    """Ordered invocations that together implement one user command.

    Most commands translate to a single step. The ephemeral-execute pattern
    for managers without a native equivalent needs three (add, exec, remove).
    """

    package_manager: PackageManager
    steps: tuple[Invocation, ...]


@dataclass(frozen=True)
class Resolution:
    """Result of resolving which package manager to use.

    Attributes:
        package_manager: The chosen package manager
        source: How the choice was made
        detected: Managers whose lockfiles were found (empty when forced)
        warning: Optional message for the user (set on fallback)
        saved_as_default: Whether an interactive choice was persisted as the default
    """

    package_manager: PackageManager
    source: ResolutionSource
    detected: tuple[PackageManager, ...]
    warning: str | None = None
    saved_as_default: bool = False
