"""Per-package-manager capability table.

Every behavioral difference between package managers is expressed as data
in TRAITS. Supporting another manager means adding a row here (and a
member to PackageManager), not touching control flow.
"""

from dataclasses import dataclass

from pmswitch.types import ALL_PACKAGE_MANAGERS, PackageManager

# npm verbs that exist natively. Anything else npm is asked to run is a
# package.json script and needs the explicit `run` indicator.
_NPM_NATIVE_COMMANDS = frozenset(
    {
        "access",
        "adduser",
        "bugs",
        "cache",
        "ci",
        "completion",
        "config",
        "dedupe",
        "deprecate",
        "diff",
        "dist-tag",
        "docs",
        "doctor",
        "edit",
        "explain",
        "explore",
        "find-dupes",
        "fund",
        "help",
        "hook",
        "info",
        "init",
        "install-ci-test",
        "install-test",
        "login",
        "logout",
        "ls",
        "org",
        "owner",
        "pack",
        "ping",
        "pkg",
        "prefix",
        "profile",
        "prune",
        "query",
        "rebuild",
        "repo",
        "restart",
        "root",
        "run-script",
        "sbom",
        "search",
        "shrinkwrap",
        "star",
        "stars",
        "start",
        "stop",
        "team",
        "token",
        "undeprecate",
        "unpublish",
        "unstar",
        "version",
        "view",
        "whoami",
    }
)


@dataclass(frozen=True)
class PackageManagerTraits:
    """Static description of one package manager.

    Attributes:
        name: Executable name
        lockfile: File whose presence marks a project as owned by this manager
        color: click color used when displaying the manager's name
        install_adds_packages: Whether `install <pkg>` adds a new dependency.
            When False, `install` with arguments is translated to `add`.
        ephemeral_exec: Tokens of the native "run a package without adding it"
            subcommand, or None when the manager has no such subcommand
        bare_scripts: Whether package.json scripts can be run by bare name.
            When False, unknown commands are prefixed with `run`.
        native_commands: Built-in verbs that are never treated as script names
    """

    name: PackageManager
    lockfile: str
    color: str
    install_adds_packages: bool
    ephemeral_exec: tuple[str, ...] | None
    bare_scripts: bool
    native_commands: frozenset[str]


TRAITS: dict[PackageManager, PackageManagerTraits] = {
    "pnpm": PackageManagerTraits(
        name="pnpm",
        lockfile="pnpm-lock.yaml",
        color="magenta",
        install_adds_packages=True,
        ephemeral_exec=("dlx",),
        bare_scripts=True,
        native_commands=frozenset(),
    ),
    "bun": PackageManagerTraits(
        name="bun",
        lockfile="bun.lockb",
        color="cyan",
        install_adds_packages=True,
        ephemeral_exec=("x",),
        bare_scripts=True,
        native_commands=frozenset(),
    ),
    "yarn": PackageManagerTraits(
        name="yarn",
        lockfile="yarn.lock",
        color="yellow",
        install_adds_packages=False,
        ephemeral_exec=None,
        bare_scripts=True,
        native_commands=frozenset(),
    ),
    "npm": PackageManagerTraits(
        name="npm",
        lockfile="package-lock.json",
        color="blue",
        install_adds_packages=True,
        ephemeral_exec=("exec",),
        bare_scripts=False,
        native_commands=_NPM_NATIVE_COMMANDS,
    ),
}

LOCKFILES: dict[PackageManager, str] = {pm: TRAITS[pm].lockfile for pm in ALL_PACKAGE_MANAGERS}

DEFAULT_PRIORITY: tuple[PackageManager, ...] = ("pnpm", "npm", "yarn", "bun")

# Used when nothing is detected or configured, and to install other managers.
BASELINE_PACKAGE_MANAGER: PackageManager = "npm"


def get_traits(package_manager: PackageManager) -> PackageManagerTraits:
    """Look up the traits row for a package manager."""
    return TRAITS[package_manager]
