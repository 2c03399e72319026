"""Configuration model, parsing and merging.

Configuration is layered, later layers overriding earlier ones per field:

1. Built-in defaults (DEFAULT_CONFIG)
2. Per-user file: ~/.pmswitch/config.toml
3. Per-project block: the "pmswitchConfig" object in package.json

Example config.toml:
  default_package_manager = "pnpm"
  priority = ["pnpm", "yarn", "npm", "bun"]
  interactive = true
  auto_install = false

Example package.json block:
  "pmswitchConfig": {
    "defaultPackageManager": "yarn",
    "autoInstall": true
  }

Loading never fails: unreadable files and invalid values are reported as
warnings and the affected layer or field is skipped.
"""

import json
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from pmswitch.package_managers import DEFAULT_PRIORITY
from pmswitch.types import PackageManager, PmSwitchConfig, parse_package_manager

DEFAULT_CONFIG = PmSwitchConfig(
    default_package_manager=None,
    priority=DEFAULT_PRIORITY,
    interactive=True,
    auto_install=False,
)

PACKAGE_JSON_FILENAME = "package.json"
PROJECT_CONFIG_KEY = "pmswitchConfig"


@dataclass(frozen=True)
class ConfigKeys:
    """Names of the config fields in one storage format."""

    default_package_manager: str
    priority: str
    interactive: str
    auto_install: str


USER_KEYS = ConfigKeys(
    default_package_manager="default_package_manager",
    priority="priority",
    interactive="interactive",
    auto_install="auto_install",
)

PROJECT_KEYS = ConfigKeys(
    default_package_manager="defaultPackageManager",
    priority="priority",
    interactive="interactive",
    auto_install="autoInstall",
)


@dataclass(frozen=True)
class ConfigOverrides:
    """Partial configuration from one layer. None means "not set here"."""

    default_package_manager: PackageManager | None = None
    priority: tuple[PackageManager, ...] | None = None
    interactive: bool | None = None
    auto_install: bool | None = None


@dataclass(frozen=True)
class LoadedConfig:
    """Merged configuration plus the warnings produced while loading it."""

    config: PmSwitchConfig
    warnings: tuple[str, ...]


def normalize_priority(
    values: list[object], *, source: str, key: str
) -> tuple[tuple[PackageManager, ...], list[str]]:
    """Turn a raw priority list into a duplicate-free tuple of managers.

    Unknown names are dropped with a warning; repeated names keep their
    first position.
    """
    warnings: list[str] = []
    result: list[PackageManager] = []
    for value in values:
        pm = parse_package_manager(value) if isinstance(value, str) else None
        if pm is None:
            warnings.append(f"{source}: ignoring unknown package manager {value!r} in '{key}'")
            continue
        if pm not in result:
            result.append(pm)
    return tuple(result), warnings


def parse_config_overrides(
    data: Mapping[str, object], *, source: str, keys: ConfigKeys
) -> tuple[ConfigOverrides, list[str]]:
    """Parse one configuration layer.

    Args:
        data: Raw mapping read from TOML or JSON
        source: Label used in warnings (usually the file path)
        keys: Field names used by this storage format

    Returns:
        Tuple of (overrides, warnings). Invalid fields are left unset.
    """
    warnings: list[str] = []
    default_pm: PackageManager | None = None
    priority: tuple[PackageManager, ...] | None = None
    interactive: bool | None = None
    auto_install: bool | None = None

    raw_default = data.get(keys.default_package_manager)
    if raw_default is not None:
        parsed = parse_package_manager(raw_default) if isinstance(raw_default, str) else None
        if parsed is None:
            warnings.append(
                f"{source}: ignoring invalid '{keys.default_package_manager}' {raw_default!r}"
            )
        default_pm = parsed

    raw_priority = data.get(keys.priority)
    if raw_priority is not None:
        if isinstance(raw_priority, list):
            priority, priority_warnings = normalize_priority(
                raw_priority, source=source, key=keys.priority
            )
            warnings.extend(priority_warnings)
        else:
            warnings.append(f"{source}: ignoring '{keys.priority}', expected a list")

    raw_interactive = data.get(keys.interactive)
    if raw_interactive is not None:
        if isinstance(raw_interactive, bool):
            interactive = raw_interactive
        else:
            warnings.append(f"{source}: ignoring '{keys.interactive}', expected true or false")

    raw_auto_install = data.get(keys.auto_install)
    if raw_auto_install is not None:
        if isinstance(raw_auto_install, bool):
            auto_install = raw_auto_install
        else:
            warnings.append(f"{source}: ignoring '{keys.auto_install}', expected true or false")

    overrides = ConfigOverrides(
        default_package_manager=default_pm,
        priority=priority,
        interactive=interactive,
        auto_install=auto_install,
    )
    return overrides, warnings


def merge_config(base: PmSwitchConfig, overrides: ConfigOverrides) -> PmSwitchConfig:
    """Apply one layer of overrides on top of a config, field by field."""
    merged = base
    if overrides.default_package_manager is not None:
        merged = replace(merged, default_package_manager=overrides.default_package_manager)
    if overrides.priority is not None:
        merged = replace(merged, priority=overrides.priority)
    if overrides.interactive is not None:
        merged = replace(merged, interactive=overrides.interactive)
    if overrides.auto_install is not None:
        merged = replace(merged, auto_install=overrides.auto_install)
    return merged


def read_user_config(path: Path) -> tuple[ConfigOverrides, list[str]]:
    """Read the per-user TOML config file.

    Returns empty overrides when the file does not exist.
    """
    if not path.exists():
        return ConfigOverrides(), []

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        return ConfigOverrides(), [f"Failed to load user config {path}: {e}"]

    return parse_config_overrides(data, source=str(path), keys=USER_KEYS)


def read_project_config(project_dir: Path) -> tuple[ConfigOverrides, list[str]]:
    """Read the "pmswitchConfig" block from <project_dir>/package.json.

    Returns empty overrides when there is no package.json or no block.
    """
    path = project_dir / PACKAGE_JSON_FILENAME
    if not path.exists():
        return ConfigOverrides(), []

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        return ConfigOverrides(), [f"Failed to load project config {path}: {e}"]

    if not isinstance(data, dict):
        return ConfigOverrides(), []

    block = data.get(PROJECT_CONFIG_KEY)
    if block is None:
        return ConfigOverrides(), []
    if not isinstance(block, dict):
        return ConfigOverrides(), [f"{path}: ignoring '{PROJECT_CONFIG_KEY}', expected an object"]

    return parse_config_overrides(block, source=f"{path} ({PROJECT_CONFIG_KEY})", keys=PROJECT_KEYS)


def load_layered_config(*, user_config_path: Path, project_dir: Path) -> LoadedConfig:
    """Merge built-in defaults, the user file and the project block."""
    user_overrides, user_warnings = read_user_config(user_config_path)
    project_overrides, project_warnings = read_project_config(project_dir)

    config = merge_config(merge_config(DEFAULT_CONFIG, user_overrides), project_overrides)
    return LoadedConfig(config=config, warnings=tuple(user_warnings + project_warnings))
