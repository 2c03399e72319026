"""Tests for package manager resolution and installation checks."""

from dataclasses import replace
from pathlib import Path

import pytest

from pmswitch.config import DEFAULT_CONFIG
from pmswitch.errors import PackageManagerInstallError, PackageManagerNotInstalledError
from pmswitch.gateway.config_store.fake import FakeConfigStore
from pmswitch.gateway.process.abc import ProcessResult
from pmswitch.gateway.process.fake import FakeProcessRunner
from pmswitch.gateway.prompter.fake import FakePrompter
from pmswitch.resolution import (
    FALLBACK_WARNING,
    MULTIPLE_LOCKFILES_MESSAGE,
    NO_LOCKFILE_MESSAGE,
    ensure_installed,
    resolve_package_manager,
)


def _resolve(
    cwd: Path,
    *,
    config=DEFAULT_CONFIG,
    forced=None,
    interactive=False,
    prompter: FakePrompter | None = None,
    config_store: FakeConfigStore | None = None,
):
    return resolve_package_manager(
        cwd=cwd,
        config=config,
        forced=forced,
        interactive=interactive,
        prompter=prompter if prompter is not None else FakePrompter(),
        config_store=config_store if config_store is not None else FakeConfigStore(),
    )


def test_forced_skips_detection(tmp_path: Path) -> None:
    (tmp_path / "yarn.lock").touch()

    resolution = _resolve(tmp_path, forced="bun")

    assert resolution.package_manager == "bun"
    assert resolution.source == "forced"
    assert resolution.detected == ()


def test_single_lockfile_is_used(tmp_path: Path) -> None:
    (tmp_path / "pnpm-lock.yaml").touch()

    resolution = _resolve(tmp_path)

    assert resolution.package_manager == "pnpm"
    assert resolution.source == "detected"


def test_multiple_lockfiles_prompt_when_interactive(tmp_path: Path) -> None:
    (tmp_path / "yarn.lock").touch()
    (tmp_path / "package-lock.json").touch()
    prompter = FakePrompter(selections=["npm"])

    resolution = _resolve(tmp_path, interactive=True, prompter=prompter)

    assert resolution.package_manager == "npm"
    assert resolution.source == "prompt"
    assert prompter.selection_prompts == [(MULTIPLE_LOCKFILES_MESSAGE, ["yarn", "npm"])]


def test_multiple_lockfiles_use_priority_when_not_interactive(tmp_path: Path) -> None:
    (tmp_path / "yarn.lock").touch()
    (tmp_path / "bun.lockb").touch()
    config = replace(DEFAULT_CONFIG, priority=("yarn", "bun"))

    resolution = _resolve(tmp_path, config=config)

    assert resolution.package_manager == "yarn"
    assert resolution.source == "priority"
    assert resolution.detected == ("bun", "yarn")


def test_multiple_lockfiles_fall_back_to_first_detected(tmp_path: Path) -> None:
    """Managers missing from the priority order still resolve deterministically."""
    (tmp_path / "yarn.lock").touch()
    (tmp_path / "bun.lockb").touch()
    config = replace(DEFAULT_CONFIG, priority=("pnpm",))

    resolution = _resolve(tmp_path, config=config)

    assert resolution.package_manager == "bun"
    assert resolution.source == "detected"


def test_no_lockfile_uses_configured_default(tmp_path: Path) -> None:
    config = replace(DEFAULT_CONFIG, default_package_manager="yarn")

    resolution = _resolve(tmp_path, config=config, interactive=True)

    assert resolution.package_manager == "yarn"
    assert resolution.source == "default"


def test_no_lockfile_prompts_and_saves_default(tmp_path: Path) -> None:
    prompter = FakePrompter(selections=["pnpm"], confirmations=[True])
    config_store = FakeConfigStore()

    resolution = _resolve(tmp_path, interactive=True, prompter=prompter, config_store=config_store)

    assert resolution.package_manager == "pnpm"
    assert resolution.source == "prompt"
    assert resolution.saved_as_default is True
    assert prompter.selection_prompts == [(NO_LOCKFILE_MESSAGE, ["pnpm", "bun", "yarn", "npm"])]
    assert prompter.confirm_prompts == [
        "Would you like to save pnpm as your default package manager?"
    ]
    assert config_store.saved_defaults == ["pnpm"]


def test_no_lockfile_prompt_without_saving(tmp_path: Path) -> None:
    prompter = FakePrompter(selections=["bun"], confirmations=[False])
    config_store = FakeConfigStore()

    resolution = _resolve(tmp_path, interactive=True, prompter=prompter, config_store=config_store)

    assert resolution.package_manager == "bun"
    assert resolution.saved_as_default is False
    assert config_store.saved_defaults == []


def test_no_lockfile_non_interactive_falls_back_to_npm(tmp_path: Path) -> None:
    resolution = _resolve(tmp_path)

    assert resolution.package_manager == "npm"
    assert resolution.source == "fallback"
    assert resolution.warning == FALLBACK_WARNING


class TestEnsureInstalled:
    """Tests for ensure_installed."""

    def test_uses_detector_lookup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The installation check goes through detector.is_installed."""
        checked: list[str] = []

        def recording_is_installed(package_manager, runner) -> bool:
            checked.append(package_manager)
            return True

        monkeypatch.setattr("pmswitch.resolution.is_installed", recording_is_installed)

        ensure_installed(
            "bun",
            config=DEFAULT_CONFIG,
            interactive=False,
            runner=FakeProcessRunner(installed=set()),
            prompter=FakePrompter(),
        )

        assert checked == ["bun"]

    def test_installed_manager_needs_nothing(self) -> None:
        runner = FakeProcessRunner(installed={"pnpm"})

        installed_now = ensure_installed(
            "pnpm", config=DEFAULT_CONFIG, interactive=False, runner=runner, prompter=FakePrompter()
        )

        assert installed_now is False
        assert runner.run_calls == []

    def test_missing_manager_without_permission_raises(self) -> None:
        runner = FakeProcessRunner(installed={"npm"})

        with pytest.raises(PackageManagerNotInstalledError, match="'bun' is not installed"):
            ensure_installed(
                "bun",
                config=DEFAULT_CONFIG,
                interactive=False,
                runner=runner,
                prompter=FakePrompter(),
            )
        assert runner.run_calls == []

    def test_auto_install_installs_without_prompting(self) -> None:
        runner = FakeProcessRunner(installed={"npm"})
        config = replace(DEFAULT_CONFIG, auto_install=True)

        installed_now = ensure_installed(
            "pnpm", config=config, interactive=True, runner=runner, prompter=FakePrompter()
        )

        assert installed_now is True
        assert runner.command_lines == ["npm install -g pnpm"]

    def test_confirmed_prompt_installs(self) -> None:
        runner = FakeProcessRunner(installed={"npm"})
        prompter = FakePrompter(confirmations=[True])

        installed_now = ensure_installed(
            "yarn", config=DEFAULT_CONFIG, interactive=True, runner=runner, prompter=prompter
        )

        assert installed_now is True
        assert prompter.confirm_prompts == [
            "yarn is not installed. Would you like to install it globally?"
        ]
        assert runner.command_lines == ["npm install -g yarn"]

    def test_declined_prompt_raises(self) -> None:
        runner = FakeProcessRunner(installed={"npm"})
        prompter = FakePrompter(confirmations=[False])

        with pytest.raises(PackageManagerNotInstalledError):
            ensure_installed(
                "yarn", config=DEFAULT_CONFIG, interactive=True, runner=runner, prompter=prompter
            )
        assert runner.run_calls == []

    def test_failed_install_raises_install_error(self) -> None:
        runner = FakeProcessRunner(
            installed={"npm"},
            failing_commands={"npm install -g bun": ProcessResult(returncode=1, stderr="")},
        )
        config = replace(DEFAULT_CONFIG, auto_install=True)

        with pytest.raises(PackageManagerInstallError):
            ensure_installed(
                "bun", config=config, interactive=False, runner=runner, prompter=FakePrompter()
            )
