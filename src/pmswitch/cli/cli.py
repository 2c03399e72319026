import logging
from dataclasses import replace

import click

from pmswitch.cli.error_boundary import cli_error_boundary
from pmswitch.cli.logging_setup import LoggingSettings, configure_logging
from pmswitch.cli.passthrough import (
    COMMON_COMMAND_HELP,
    PassthroughGroup,
    make_passthrough_command,
)
from pmswitch.commands import COMMON_COMMANDS
from pmswitch.context import PmsContext, create_context
from pmswitch.gateway.process.dry_run import DryRunProcessRunner
from pmswitch.output import style_error, style_package_manager, user_output
from pmswitch.types import ALL_PACKAGE_MANAGERS, PackageManager, parse_package_manager

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

PACKAGE_MANAGER_CHOICE = click.Choice(ALL_PACKAGE_MANAGERS, case_sensitive=False)


def _parse_priority(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> tuple[PackageManager, ...] | None:
    if value is None:
        return None

    priority: list[PackageManager] = []
    for name in value.split(","):
        if not name.strip():
            continue
        pm = parse_package_manager(name)
        if pm is None:
            valid = ", ".join(ALL_PACKAGE_MANAGERS)
            raise click.BadParameter(f"'{name.strip()}' is not one of {valid}")
        if pm not in priority:
            priority.append(pm)

    if not priority:
        raise click.BadParameter("expected a comma-separated list of package managers")
    return tuple(priority)


def _resolve_forced(
    force: str | None, force_flags: dict[PackageManager, bool]
) -> PackageManager | None:
    requested: set[PackageManager] = {pm for pm, enabled in force_flags.items() if enabled}
    if force is not None:
        pm = parse_package_manager(force)
        if pm is not None:
            requested.add(pm)

    if len(requested) > 1:
        names = ", ".join(sorted(requested))
        raise click.UsageError(f"Only one package manager can be forced at a time (got {names})")
    if requested:
        return requested.pop()
    return None


@cli_error_boundary
def _save_default(ctx: PmsContext, package_manager: PackageManager) -> None:
    ctx.config_store.set_default_package_manager(package_manager)
    styled = style_package_manager(package_manager)
    user_output(f"Default package manager set to {styled} in {ctx.config_store.config_path()}")


@cli_error_boundary
def _save_priority(ctx: PmsContext, priority: tuple[PackageManager, ...]) -> None:
    ctx.config_store.set_priority(priority)
    user_output(f"Priority set to {', '.join(priority)} in {ctx.config_store.config_path()}")


@click.group(
    cls=PassthroughGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(None, "-v", "--version", package_name="pmswitch")
@click.option("--force-pnpm", is_flag=True, help="Use pnpm regardless of lockfiles.")
@click.option("--force-bun", is_flag=True, help="Use bun regardless of lockfiles.")
@click.option("--force-yarn", is_flag=True, help="Use yarn regardless of lockfiles.")
@click.option("--force-npm", is_flag=True, help="Use npm regardless of lockfiles.")
@click.option(
    "--force", type=PACKAGE_MANAGER_CHOICE, help="Use the given package manager."
)
@click.option(
    "--default",
    "default_pm",
    type=PACKAGE_MANAGER_CHOICE,
    help="Save the package manager used when no lockfile is found.",
)
@click.option(
    "--set-priority",
    "priority",
    callback=_parse_priority,
    metavar="PM,PM,...",
    help="Save the order used when several lockfiles are found.",
)
@click.option("--no-interactive", is_flag=True, help="Never prompt.")
@click.option("--dry-run", is_flag=True, help="Print commands instead of running them.")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    force_pnpm: bool,
    force_bun: bool,
    force_yarn: bool,
    force_npm: bool,
    force: str | None,
    default_pm: str | None,
    priority: tuple[PackageManager, ...] | None,
    no_interactive: bool,
    dry_run: bool,
    debug: bool,
) -> None:
    """Run package manager commands with whichever manager the project uses.

    The package manager is detected from the lockfile in the current
    directory. Any command not listed below is forwarded as-is, so
    `pms build` runs the project's build script.
    """
    configure_logging(LoggingSettings.from_flags(debug=debug))

    forced = _resolve_forced(
        force,
        {"pnpm": force_pnpm, "bun": force_bun, "yarn": force_yarn, "npm": force_npm},
    )

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)
    elif dry_run and not ctx.obj.dry_run:
        ctx.obj = replace(ctx.obj, runner=DryRunProcessRunner(ctx.obj.runner), dry_run=True)
    ctx.obj = replace(ctx.obj, forced=forced, no_interactive=no_interactive, debug=debug)

    if default_pm is not None:
        default = parse_package_manager(default_pm)
        assert default is not None  # guaranteed by PACKAGE_MANAGER_CHOICE
        _save_default(ctx.obj, default)
    if priority is not None:
        _save_priority(ctx.obj, priority)

    if ctx.invoked_subcommand is None and default_pm is None and priority is None:
        click.echo(ctx.get_help())


for _name in COMMON_COMMANDS:
    cli.add_command(make_passthrough_command(_name, COMMON_COMMAND_HELP[_name]))


def main() -> None:
    """CLI entry point used by the `pms` console script."""
    try:
        cli()
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        user_output(style_error(str(e) or type(e).__name__))
        raise SystemExit(1) from e
