"""pmswitch CLI entry point.

This package provides a Click-based CLI that detects which JavaScript package
manager owns a project (from its lockfile) and forwards commands to it.
See `pms --help` for details.
"""


def main() -> None:
    """CLI entry point used by the `pms` console script."""
    # Inline import keeps `import pmswitch.types` free of CLI side effects
    from pmswitch.cli.cli import main as cli_main

    cli_main()
