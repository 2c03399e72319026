"""Translation of abstract commands into package manager invocations.

A user types one command vocabulary (`pms add react`, `pms remove lodash`,
`pms exec cowsay hi`, `pms build`) and this module produces the argv each
package manager actually understands. Per-manager differences come from the
TRAITS table; the policies below are evaluated in a fixed order:

1. install-vs-add: managers whose `install` cannot add named packages get
   `add` when `install` is given package names (flags alone keep `install`).
2. ephemeral execute: exec-family commands use the manager's native
   one-off runner, or an add/exec/remove sequence when it has none.
3. mapping: static renames, then `run <script>` for managers that cannot
   run package.json scripts by bare name. Script args that look like
   options are put after `--`.
"""

from pmswitch.package_managers import get_traits
from pmswitch.types import CommandPlan, Invocation, PackageManager

# Verbs exposed as first-class CLI subcommands
COMMON_COMMANDS: tuple[str, ...] = (
    "install",
    "add",
    "remove",
    "run",
    "exec",
    "update",
    "init",
    "uninstall",
    "list",
    "outdated",
    "audit",
    "test",
    "publish",
    "link",
    "unlink",
)

# Verbs meaning "run a package's binary without keeping it as a dependency"
EPHEMERAL_EXEC_COMMANDS = frozenset({"exec", "dlx", "npx", "x"})

# Static renames. Managers missing from an entry use the command unchanged.
COMMAND_MAPPING: dict[str, dict[PackageManager, tuple[str, ...]]] = {
    "add": {
        "npm": ("install",),
    },
    "remove": {
        "npm": ("uninstall",),
    },
    "uninstall": {
        "pnpm": ("remove",),
        "bun": ("remove",),
        "yarn": ("remove",),
    },
    "update": {
        "yarn": ("upgrade",),
    },
    "list": {
        "bun": ("pm", "ls"),
    },
}


def strip_version(package_spec: str) -> str:
    """Strip a version qualifier from a package spec.

    Examples:
        >>> strip_version("cowsay@1.0.0")
        'cowsay'
        >>> strip_version("@scope/tool@2")
        '@scope/tool'
        >>> strip_version("@scope/tool")
        '@scope/tool'
    """
    # A leading "@" belongs to the scope, not to a version
    separator = package_spec.find("@", 1)
    if separator == -1:
        return package_spec
    return package_spec[:separator]


def map_command(command: str, package_manager: PackageManager) -> tuple[str, ...]:
    """Map an abstract command to the manager's concrete subcommand tokens.

    Args:
        command: Abstract command name (e.g. "remove", "build")
        package_manager: Target package manager

    Returns:
        One or more argv tokens. Script names for managers without bare
        script execution come back as ("run", name), never as one fused token.
    """
    mapping = COMMAND_MAPPING.get(command)
    if mapping is not None and package_manager in mapping:
        return mapping[package_manager]

    traits = get_traits(package_manager)
    is_known = (
        command in COMMON_COMMANDS
        or command in COMMAND_MAPPING
        or command in traits.native_commands
    )
    if not traits.bare_scripts and not is_known:
        return ("run", command)

    return (command,)


def _has_package_names(args: list[str]) -> bool:
    return any(not arg.startswith("-") for arg in args)


def _script_args(args: list[str]) -> list[str]:
    # npm hands only the args after `--` to the script
    if "--" in args or not any(arg.startswith("-") for arg in args):
        return args
    return ["--", *args]


def _ephemeral_exec_plan(
    package_manager: PackageManager, args: list[str]
) -> tuple[Invocation, ...] | None:
    traits = get_traits(package_manager)
    if traits.ephemeral_exec is not None:
        return (Invocation(package_manager, (*traits.ephemeral_exec, *args)),)

    if not args:
        # Nothing to install; let the manager report usage
        return None

    package_spec, rest = args[0], args[1:]
    bare_name = strip_version(package_spec)
    return (
        Invocation(package_manager, ("add", "--dev", package_spec)),
        Invocation(package_manager, ("exec", bare_name, *rest)),
        Invocation(package_manager, ("remove", bare_name)),
    )


def translate_command(
    command: str, args: list[str], package_manager: PackageManager
) -> CommandPlan:
    """Translate a user command into an ordered plan of invocations.

    Args:
        command: Abstract command name
        args: User arguments, passed through verbatim (npm scripts get a
            `--` in front of them when they include options)
        package_manager: Target package manager

    Returns:
        CommandPlan whose steps must run strictly in order
    """
    traits = get_traits(package_manager)

    if command == "install" and _has_package_names(args) and not traits.install_adds_packages:
        steps: tuple[Invocation, ...] = (Invocation(package_manager, ("add", *args)),)
        return CommandPlan(package_manager=package_manager, steps=steps)

    if command in EPHEMERAL_EXEC_COMMANDS:
        ephemeral = _ephemeral_exec_plan(package_manager, args)
        if ephemeral is not None:
            return CommandPlan(package_manager=package_manager, steps=ephemeral)

    tokens = map_command(command, package_manager)
    if tokens == ("run", command) and command != "run":
        args = _script_args(args)
    steps = (Invocation(package_manager, (*tokens, *args)),)
    return CommandPlan(package_manager=package_manager, steps=steps)
