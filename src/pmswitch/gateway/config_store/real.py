"""Real ConfigStore implementation.

RealConfigStore reads the per-user ~/.pmswitch/config.toml plus the
project's package.json, and updates the user file in place with tomlkit so
unrelated keys and comments survive.
"""

import os
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from pmswitch.config import USER_KEYS, LoadedConfig, load_layered_config
from pmswitch.errors import ConfigWriteError
from pmswitch.gateway.config_store.abc import ConfigStore
from pmswitch.types import PackageManager

CONFIG_PATH_ENV_VAR = "PMSWITCH_CONFIG"


def _default_config_path() -> Path:
    """Return path to the per-user config file.

    Note: Not cached to allow tests to monkeypatch Path.home().
    """
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".pmswitch" / "config.toml"


class RealConfigStore(ConfigStore):
    """Production implementation that reads and writes real files."""

    def __init__(self, *, path: Path | None = None) -> None:
        """Create RealConfigStore.

        Args:
            path: Explicit per-user config path. None resolves it from
                $PMSWITCH_CONFIG or ~/.pmswitch/config.toml at each call.
        """
        self._path = path

    def config_path(self) -> Path:
        if self._path is not None:
            return self._path
        return _default_config_path()

    def load(self, project_dir: Path) -> LoadedConfig:
        return load_layered_config(user_config_path=self.config_path(), project_dir=project_dir)

    def set_default_package_manager(self, package_manager: PackageManager) -> None:
        self._update({USER_KEYS.default_package_manager: package_manager})

    def set_priority(self, priority: tuple[PackageManager, ...]) -> None:
        self._update({USER_KEYS.priority: list(priority)})

    def _update(self, values: dict[str, Any]) -> None:
        """Read the config file, set the given keys, and write it back."""
        config_path = self.config_path()

        if config_path.exists():
            try:
                with config_path.open("r", encoding="utf-8") as f:
                    doc = tomlkit.load(f)
            except (OSError, UnicodeDecodeError, TOMLKitError) as e:
                raise ConfigWriteError(
                    f"Cannot update {config_path}: {e}\n"
                    "Fix or remove the file and try again."
                ) from e
        else:
            doc = tomlkit.document()

        assert isinstance(doc, MutableMapping), f"Expected MutableMapping, got {type(doc)}"
        for key, value in values.items():
            cast(dict[str, Any], doc)[key] = value

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with config_path.open("w", encoding="utf-8") as f:
                tomlkit.dump(doc, f)
        except OSError as e:
            raise ConfigWriteError(f"Cannot write to file: {config_path}: {e}") from e
