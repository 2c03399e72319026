"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from pmswitch.gateway.config_store.abc import ConfigStore
from pmswitch.gateway.config_store.real import RealConfigStore
from pmswitch.gateway.process.abc import ProcessRunner
from pmswitch.gateway.process.dry_run import DryRunProcessRunner
from pmswitch.gateway.process.real import RealProcessRunner
from pmswitch.gateway.prompter.abc import Prompter
from pmswitch.gateway.prompter.real import ClickPrompter
from pmswitch.gateway.terminal.abc import Terminal
from pmswitch.gateway.terminal.real import RealTerminal
from pmswitch.types import PackageManager


@dataclass(frozen=True)
class PmsContext:
    """Immutable context holding all dependencies for pmswitch operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    runner: ProcessRunner
    prompter: Prompter
    config_store: ConfigStore
    terminal: Terminal
    cwd: Path  # Directory whose lockfiles decide the package manager
    dry_run: bool
    # Global CLI options, applied by the root group callback
    forced: PackageManager | None = None
    no_interactive: bool = False
    debug: bool = False

    @staticmethod
    def for_test(
        *,
        runner: ProcessRunner | None = None,
        prompter: Prompter | None = None,
        config_store: ConfigStore | None = None,
        terminal: Terminal | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "PmsContext":
        """Create a context with fake implementations for anything not given.

        Args:
            runner: Process gateway. Defaults to a FakeProcessRunner where
                every executable is installed.
            prompter: Prompt gateway. Defaults to a FakePrompter with no
                scripted answers (any prompt fails the test).
            config_store: Config gateway. Defaults to built-in config.
            terminal: Terminal gateway. Defaults to non-interactive.
            cwd: Project directory. Defaults to Path("/test/default/cwd") to
                prevent accidental use of the real Path.cwd() in tests.
            dry_run: Whether to wrap the runner in DryRunProcessRunner

        Returns:
            Frozen PmsContext for use in tests
        """
        # Inline imports keep fakes out of production import paths
        from pmswitch.gateway.config_store.fake import FakeConfigStore
        from pmswitch.gateway.process.fake import FakeProcessRunner
        from pmswitch.gateway.prompter.fake import FakePrompter
        from pmswitch.gateway.terminal.fake import FakeTerminal

        resolved_runner = runner if runner is not None else FakeProcessRunner.create_all_installed()
        if dry_run:
            resolved_runner = DryRunProcessRunner(resolved_runner)

        return PmsContext(
            runner=resolved_runner,
            prompter=prompter if prompter is not None else FakePrompter(),
            config_store=config_store if config_store is not None else FakeConfigStore(),
            terminal=terminal if terminal is not None else FakeTerminal(is_interactive=False),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, cwd: Path | None = None) -> PmsContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, print package manager commands instead of running them
        cwd: Project directory. Defaults to the current working directory.

    Returns:
        PmsContext with real implementations
    """
    runner: ProcessRunner = RealProcessRunner()
    if dry_run:
        runner = DryRunProcessRunner(runner)

    return PmsContext(
        runner=runner,
        prompter=ClickPrompter(),
        config_store=RealConfigStore(),
        terminal=RealTerminal(),
        cwd=cwd if cwd is not None else Path.cwd(),
        dry_run=dry_run,
    )
