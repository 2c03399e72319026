"""Commands that forward their arguments to the resolved package manager."""

import logging

import click

from pmswitch.cli.error_boundary import cli_error_boundary
from pmswitch.commands import translate_command
from pmswitch.context import PmsContext
from pmswitch.executor import execute_plan
from pmswitch.output import style_command, style_package_manager, style_warning, user_output
from pmswitch.resolution import ensure_installed, resolve_package_manager
from pmswitch.types import Invocation

logger = logging.getLogger(__name__)

COMMON_COMMAND_HELP: dict[str, str] = {
    "install": "Install dependencies, or add packages when names are given.",
    "add": "Add packages to the project.",
    "remove": "Remove packages from the project.",
    "run": "Run a package.json script.",
    "exec": "Run a package binary without keeping it as a dependency.",
    "update": "Update dependencies.",
    "init": "Create a new package.json.",
    "uninstall": "Remove packages from the project.",
    "list": "List installed packages.",
    "outdated": "Show outdated packages.",
    "audit": "Audit dependencies for known vulnerabilities.",
    "test": "Run the test script.",
    "publish": "Publish the package to the registry.",
    "link": "Link a local package.",
    "unlink": "Remove a linked local package.",
}


def _announce_step(invocation: Invocation) -> None:
    line = style_command(invocation.package_manager, invocation.command_line)
    user_output(f"Executing: {line}")


@cli_error_boundary
def run_proxied_command(ctx: PmsContext, command: str, args: tuple[str, ...]) -> None:
    """Resolve the package manager for ctx.cwd and run a command with it."""
    loaded = ctx.config_store.load(ctx.cwd)
    for warning in loaded.warnings:
        logger.warning(warning)
    config = loaded.config

    interactive = (
        config.interactive and not ctx.no_interactive and ctx.terminal.is_stdin_interactive()
    )
    logger.debug("Resolving package manager in %s (interactive=%s)", ctx.cwd, interactive)

    resolution = resolve_package_manager(
        cwd=ctx.cwd,
        config=config,
        forced=ctx.forced,
        interactive=interactive,
        prompter=ctx.prompter,
        config_store=ctx.config_store,
    )
    package_manager = resolution.package_manager
    logger.debug(
        "Resolved %s via %s (detected: %s)",
        package_manager,
        resolution.source,
        ", ".join(resolution.detected) or "none",
    )
    if resolution.warning is not None:
        user_output(style_warning(resolution.warning))
    if resolution.saved_as_default:
        styled = style_package_manager(package_manager)
        user_output(f"Saved {styled} as your default package manager")

    installed_now = ensure_installed(
        package_manager,
        config=config,
        interactive=interactive,
        runner=ctx.runner,
        prompter=ctx.prompter,
    )
    if installed_now:
        user_output(f"Installed {style_package_manager(package_manager)}")

    plan = translate_command(command, list(args), package_manager)
    user_output(f"Using package manager: {style_package_manager(package_manager)}")
    execute_plan(plan, ctx.runner, on_step=_announce_step)


class PassthroughCommand(click.Command):
    """Command that receives its arguments exactly as typed.

    Click's option parser is bypassed, so `--`, `--help` and unknown
    options all reach the package manager unchanged.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args

    def collect_usage_pieces(self, ctx: click.Context) -> list[str]:
        return ["[ARGS]..."]


def make_passthrough_command(name: str, help_text: str | None = None) -> click.Command:
    """Build a command that forwards `name` and all its arguments verbatim."""

    @click.command(name, cls=PassthroughCommand, help=help_text, add_help_option=False)
    @click.pass_context
    def passthrough(click_ctx: click.Context) -> None:
        run_proxied_command(click_ctx.obj, name, tuple(click_ctx.args))

    return passthrough


class PassthroughGroup(click.Group):
    """Click group that treats any unknown subcommand as a passthrough.

    `pms build` has no registered command, so it becomes a passthrough for
    "build" and is forwarded (as a script where the manager needs `run`).
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        return make_passthrough_command(cmd_name)
