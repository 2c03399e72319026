"""Persisted configuration abstraction.

ConfigStore loads the layered pmswitch configuration and persists changes to
the per-user config file. This gateway enables testing without touching
Path.home().
"""

from abc import ABC, abstractmethod
from pathlib import Path

from pmswitch.config import LoadedConfig
from pmswitch.types import PackageManager


class ConfigStore(ABC):
    """Abstract interface for configuration persistence.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def load(self, project_dir: Path) -> LoadedConfig:
        """Load configuration merged for a project directory.

        Never raises for unreadable or invalid config; problems are
        reported in LoadedConfig.warnings instead.

        Args:
            project_dir: Directory whose package.json may hold project overrides

        Returns:
            LoadedConfig with the merged config and any load warnings
        """
        ...

    @abstractmethod
    def set_default_package_manager(self, package_manager: PackageManager) -> None:
        """Persist the default package manager in the per-user config.

        Other keys in the file are preserved.

        Args:
            package_manager: Package manager to use when no lockfile is found
        """
        ...

    @abstractmethod
    def set_priority(self, priority: tuple[PackageManager, ...]) -> None:
        """Persist the priority order in the per-user config.

        Other keys in the file are preserved.

        Args:
            priority: Tie-break order used when several lockfiles exist
        """
        ...

    @abstractmethod
    def config_path(self) -> Path:
        """Get the path of the per-user config file."""
        ...
