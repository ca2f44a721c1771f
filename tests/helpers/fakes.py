"""In-memory stand-ins for the bridge's ports.

Each fake records what the code under test asked of it, so tests can assert
on the OS calls that would have been made.
"""

from collections.abc import Sequence
from pathlib import Path

from vsbridge.ports.processes import ProcessWindow


class FakeProcessDirectory:
    """ProcessDirectory returning a fixed window list."""

    def __init__(self, windows: Sequence[ProcessWindow] = ()) -> None:
        self.windows = list(windows)
        self.calls = 0

    def add(self, title: str, handle: int, pid: int | None = None) -> ProcessWindow:
        window = ProcessWindow(title=title, handle=handle, pid=pid)
        self.windows.append(window)
        return window

    def list_processes(self) -> list[ProcessWindow]:
        self.calls += 1
        return list(self.windows)


class RecordingCommandSink:
    """RemoteCommandSink that records (handle, line) pairs."""

    def __init__(self) -> None:
        self.sent: list[tuple[int, int]] = []

    def send_goto_line(self, handle: int, line: int) -> None:
        self.sent.append((handle, line))


class RecordingLauncher:
    """ProcessLauncher that records spawns and opens.

    Args:
        spawn_error: Exception raised by spawn(), if any.
        open_error: Exception raised by open_default(), if any.
    """

    def __init__(
        self,
        spawn_error: Exception | None = None,
        open_error: Exception | None = None,
    ) -> None:
        self.spawned: list[list[str]] = []
        self.opened: list[str] = []
        self.spawn_error = spawn_error
        self.open_error = open_error

    def spawn(self, argv: Sequence[str]) -> None:
        self.spawned.append(list(argv))
        if self.spawn_error is not None:
            raise self.spawn_error

    def open_default(self, path: Path | str) -> None:
        self.opened.append(str(path))
        if self.open_error is not None:
            raise self.open_error


class StaticInstallLocator:
    """InstallLocator returning the same directory for every query."""

    def __init__(self, install_dir: Path | None = None) -> None:
        self.install_dir = install_dir
        self.queries: list[tuple[str, str]] = []

    def find_install_dir(self, key_path: str, version: str) -> Path | None:
        self.queries.append((key_path, version))
        return self.install_dir


class RecordingSleep:
    """Sleep function that records durations instead of blocking."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
