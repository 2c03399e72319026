"""Fake ConfigStore implementation for testing.

FakeConfigStore is an in-memory implementation that enables fast and
deterministic tests without touching the filesystem.
"""

from dataclasses import replace
from pathlib import Path

from pmswitch.config import DEFAULT_CONFIG, LoadedConfig
from pmswitch.gateway.config_store.abc import ConfigStore
from pmswitch.types import PackageManager, PmSwitchConfig


class FakeConfigStore(ConfigStore):
    """In-memory fake implementation that tracks mutations.

    This class has NO public setup methods beyond constructor.
    All state is provided via constructor or captured during execution.
    """

    def __init__(
        self,
        *,
        config: PmSwitchConfig | None = None,
        warnings: tuple[str, ...] = (),
    ) -> None:
        """Create FakeConfigStore with optional initial state.

        Args:
            config: Config returned by load(). None means built-in defaults.
            warnings: Load warnings returned by load()
        """
        self._config = config if config is not None else DEFAULT_CONFIG
        self._warnings = warnings
        self._saved_defaults: list[PackageManager] = []
        self._saved_priorities: list[tuple[PackageManager, ...]] = []
        self._loaded_from: list[Path] = []

    # --- Test assertions ---

    @property
    def saved_defaults(self) -> list[PackageManager]:
        """Get default package managers that were persisted.

        This property is for test assertions only.
        """
        return list(self._saved_defaults)

    @property
    def saved_priorities(self) -> list[tuple[PackageManager, ...]]:
        """Get priority orders that were persisted.

        This property is for test assertions only.
        """
        return list(self._saved_priorities)

    @property
    def loaded_from(self) -> list[Path]:
        """Get project directories passed to load().

        This property is for test assertions only.
        """
        return list(self._loaded_from)

    # --- Config operations ---

    def load(self, project_dir: Path) -> LoadedConfig:
        self._loaded_from.append(project_dir)
        return LoadedConfig(config=self._config, warnings=self._warnings)

    def set_default_package_manager(self, package_manager: PackageManager) -> None:
        self._config = replace(self._config, default_package_manager=package_manager)
        self._saved_defaults.append(package_manager)

    def set_priority(self, priority: tuple[PackageManager, ...]) -> None:
        self._config = replace(self._config, priority=priority)
        self._saved_priorities.append(priority)

    def config_path(self) -> Path:
        return Path("/fake/pmswitch/config.toml")
