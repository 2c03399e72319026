"""Fake ProcessRunner implementation for testing.

FakeProcessRunner is an in-memory implementation that records every run
call and reports configured results, enabling fast and deterministic tests.
"""

from dataclasses import dataclass

from pmswitch.gateway.process.abc import ProcessResult, ProcessRunner


@dataclass(frozen=True)
class RunCall:
    """Record of a run call for test assertions."""

    executable: str
    argv: list[str]

    @property
    def command_line(self) -> str:
        return " ".join([self.executable, *self.argv])


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation that tracks run calls.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        installed: set[str] | None = None,
        failing_commands: dict[str, ProcessResult] | None = None,
        install_on_global_add: bool = True,
    ) -> None:
        """Create FakeProcessRunner.

        Args:
            installed: Executables reported as installed. None means all are installed.
            failing_commands: Maps full command lines (e.g. "yarn exec cowsay hello")
                to the result they should produce. Unlisted commands succeed.
            install_on_global_add: Whether a successful `npm install -g <name>`
                marks <name> as installed for later lookups.
        """
        self._installed = set(installed) if installed is not None else None
        self._failing_commands = failing_commands if failing_commands is not None else {}
        self._install_on_global_add = install_on_global_add
        self._run_calls: list[RunCall] = []
        self._lookups: list[str] = []

    @classmethod
    def create_all_installed(cls) -> "FakeProcessRunner":
        """Create a FakeProcessRunner where every executable exists and every run succeeds."""
        return cls(installed=None, failing_commands=None)

    @property
    def run_calls(self) -> list[RunCall]:
        """Get the list of run calls that were made.

        Returns a copy of the list to prevent external mutation.

        This property is for test assertions only.
        """
        return list(self._run_calls)

    @property
    def command_lines(self) -> list[str]:
        """Get the command lines that were run, in order.

        This property is for test assertions only.
        """
        return [call.command_line for call in self._run_calls]

    @property
    def lookups(self) -> list[str]:
        """Get the executables that were looked up via is_installed.

        This property is for test assertions only.
        """
        return list(self._lookups)

    def is_installed(self, executable: str) -> bool:
        self._lookups.append(executable)
        if self._installed is None:
            return True
        return executable in self._installed

    def run(self, executable: str, argv: list[str]) -> ProcessResult:
        call = RunCall(executable=executable, argv=list(argv))
        self._run_calls.append(call)

        failure = self._failing_commands.get(call.command_line)
        if failure is not None:
            return failure

        is_global_add = argv[:2] == ["install", "-g"] and len(argv) == 3
        if is_global_add and self._install_on_global_add and self._installed is not None:
            self._installed.add(argv[2])

        return ProcessResult(returncode=0, stderr="")
