"""Tests for Prompter implementations."""

import pytest

from pmswitch.gateway.prompter.fake import FakePrompter
from pmswitch.gateway.prompter.real import ClickPrompter


def test_click_prompter_returns_only_choice_without_prompting() -> None:
    assert ClickPrompter().select_package_manager("Which?", ["yarn"]) == "yarn"


def test_click_prompter_rejects_empty_choices() -> None:
    with pytest.raises(ValueError):
        ClickPrompter().select_package_manager("Which?", [])


def test_click_prompter_accepts_number(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pmswitch.gateway.prompter.real.click.prompt", lambda *a, **kw: "2")

    assert ClickPrompter().select_package_manager("Which?", ["pnpm", "npm"]) == "npm"


def test_click_prompter_accepts_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pmswitch.gateway.prompter.real.click.prompt", lambda *a, **kw: "pnpm")

    assert ClickPrompter().select_package_manager("Which?", ["pnpm", "npm"]) == "pnpm"


def test_fake_prompter_replays_answers_in_order() -> None:
    prompter = FakePrompter(selections=["bun", "npm"], confirmations=[True, False])

    assert prompter.select_package_manager("first", ["bun", "npm"]) == "bun"
    assert prompter.select_package_manager("second", ["bun", "npm"]) == "npm"
    assert prompter.confirm("ok?", default=False) is True
    assert prompter.confirm("sure?", default=True) is False
    assert prompter.confirm_prompts == ["ok?", "sure?"]


def test_fake_prompter_fails_on_unexpected_prompt() -> None:
    with pytest.raises(AssertionError, match="Unexpected confirmation prompt"):
        FakePrompter().confirm("install?", default=True)


def test_fake_prompter_rejects_answer_outside_choices() -> None:
    prompter = FakePrompter(selections=["bun"])

    with pytest.raises(AssertionError):
        prompter.select_package_manager("Which?", ["pnpm", "yarn"])
