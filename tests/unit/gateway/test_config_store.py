"""Tests for ConfigStore implementations."""

from dataclasses import replace
from pathlib import Path

import pytest
import tomlkit

from pmswitch.config import DEFAULT_CONFIG
from pmswitch.errors import ConfigWriteError
from pmswitch.gateway.config_store.fake import FakeConfigStore
from pmswitch.gateway.config_store.real import RealConfigStore


def test_set_default_preserves_other_fields(tmp_path: Path) -> None:
    """Saving a default keeps priority, interactive and auto_install intact."""
    config_path = tmp_path / ".pmswitch" / "config.toml"
    store = RealConfigStore(path=config_path)
    store.set_priority(("yarn", "pnpm"))
    config_path.write_text(
        config_path.read_text(encoding="utf-8") + "interactive = false\nauto_install = true\n",
        encoding="utf-8",
    )

    store.set_default_package_manager("bun")
    loaded = store.load(tmp_path)

    assert loaded.warnings == ()
    assert loaded.config.default_package_manager == "bun"
    assert loaded.config.priority == ("yarn", "pnpm")
    assert loaded.config.interactive is False
    assert loaded.config.auto_install is True


def test_update_keeps_unrelated_keys_and_comments(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        '# my settings\ndefault_package_manager = "npm"\n\n[extra]\nkeep = "me"\n',
        encoding="utf-8",
    )

    RealConfigStore(path=config_path).set_default_package_manager("pnpm")

    content = config_path.read_text(encoding="utf-8")
    assert "# my settings" in content
    doc = tomlkit.parse(content)
    assert doc["default_package_manager"] == "pnpm"
    assert doc["extra"]["keep"] == "me"


def test_set_priority_creates_parent_directories(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "dir" / "config.toml"

    RealConfigStore(path=config_path).set_priority(("bun",))

    assert tomlkit.parse(config_path.read_text(encoding="utf-8"))["priority"] == ["bun"]


def test_update_refuses_to_overwrite_corrupt_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("priority = [", encoding="utf-8")

    with pytest.raises(ConfigWriteError):
        RealConfigStore(path=config_path).set_default_package_manager("pnpm")

    assert config_path.read_text(encoding="utf-8") == "priority = ["


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    override = tmp_path / "custom.toml"
    monkeypatch.setenv("PMSWITCH_CONFIG", str(override))

    assert RealConfigStore().config_path() == override


def test_config_path_defaults_to_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PMSWITCH_CONFIG", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    assert RealConfigStore().config_path() == tmp_path / ".pmswitch" / "config.toml"


def test_load_reads_project_block(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        '{"pmswitchConfig": {"autoInstall": true}}', encoding="utf-8"
    )

    loaded = RealConfigStore(path=tmp_path / "missing.toml").load(tmp_path)

    assert loaded.config == replace(DEFAULT_CONFIG, auto_install=True)


def test_fake_tracks_saves_and_reflects_them_in_load() -> None:
    store = FakeConfigStore()

    store.set_default_package_manager("yarn")
    store.set_priority(("yarn", "npm"))
    loaded = store.load(Path("/project"))

    assert store.saved_defaults == ["yarn"]
    assert store.saved_priorities == [("yarn", "npm")]
    assert store.loaded_from == [Path("/project")]
    assert loaded.config.default_package_manager == "yarn"
    assert loaded.config.priority == ("yarn", "npm")
