"""Process directory port interface.

Defines the interface for enumerating running processes and their main
windows, so instance lookup can run against a fake directory in tests.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ProcessWindow:
    """Main window of a running process.

    Attributes:
        title: Window title text as shown by the OS.
        handle: Opaque window handle (HWND on Windows).
        pid: Owning process id, or None if unknown.
        process_name: Executable name, or "" if unknown.
    """

    title: str
    handle: int
    pid: int | None = None
    process_name: str = ""


class ProcessDirectory(Protocol):
    """Protocol for enumerating live process windows."""

    def list_processes(self) -> Iterable[ProcessWindow]:
        """Snapshot the current top-level process windows.

        Returns:
            Iterable of ProcessWindow entries. Order is OS-defined.
        """
        ...
