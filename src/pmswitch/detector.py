"""Lockfile-based package manager detection.

Only the given directory is scanned; parent directories are never searched.
Lockfile contents are ignored, only their presence matters.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pmswitch.errors import NoLockfileDetectedError
from pmswitch.gateway.process.abc import ProcessRunner
from pmswitch.package_managers import DEFAULT_PRIORITY, LOCKFILES
from pmswitch.types import ALL_PACKAGE_MANAGERS, NoLockfileSentinel, PackageManager


def _lockfile_path(directory: Path, package_manager: PackageManager) -> Path | None:
    path = directory / LOCKFILES[package_manager]
    if path.exists():
        return path
    return None


def detect_lockfiles(directory: Path) -> dict[PackageManager, Path | None]:
    """Check which package managers have a lockfile directly in a directory.

    The per-manager checks are independent and run concurrently; all of them
    complete before the result is returned.

    Args:
        directory: Project directory to scan

    Returns:
        Mapping of every package manager to its lockfile path, or None if absent
    """
    with ThreadPoolExecutor(max_workers=len(ALL_PACKAGE_MANAGERS)) as executor:
        futures = {
            pm: executor.submit(_lockfile_path, directory, pm) for pm in ALL_PACKAGE_MANAGERS
        }
        return {pm: future.result() for pm, future in futures.items()}


def detect_package_manager(
    directory: Path,
    priority: tuple[PackageManager, ...] = DEFAULT_PRIORITY,
    *,
    throw_on_missing: bool = True,
) -> PackageManager | NoLockfileSentinel:
    """Pick the highest-priority package manager whose lockfile is present.

    Args:
        directory: Project directory to scan
        priority: Tie-break order; managers not listed are never returned
        throw_on_missing: Raise instead of returning the sentinel when no
            listed manager has a lockfile

    Returns:
        The selected package manager, or NoLockfileSentinel

    Raises:
        NoLockfileDetectedError: If nothing was found and throw_on_missing is True
    """
    lockfiles = detect_lockfiles(directory)
    for pm in priority:
        if lockfiles[pm] is not None:
            return pm

    if throw_on_missing:
        raise NoLockfileDetectedError()
    return NoLockfileSentinel()


def get_all_detected(directory: Path) -> list[PackageManager]:
    """List every package manager with a lockfile, in canonical order."""
    lockfiles = detect_lockfiles(directory)
    return [pm for pm in ALL_PACKAGE_MANAGERS if lockfiles[pm] is not None]


def is_installed(package_manager: PackageManager, runner: ProcessRunner) -> bool:
    """Check whether a package manager's executable is on PATH."""
    return runner.is_installed(package_manager)
