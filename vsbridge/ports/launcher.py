"""Process launcher port interface.

Defines the two OS primitives the bridge needs: spawning an executable with
arguments, and opening a file with its default application.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class ProcessLauncher(Protocol):
    """Protocol for starting processes."""

    def spawn(self, argv: Sequence[str]) -> None:
        """Start an executable without waiting for it.

        Args:
            argv: Executable path followed by its arguments.

        Raises:
            OSError: If the executable cannot be started.
        """
        ...

    def open_default(self, path: Path | str) -> None:
        """Open a file with the application associated with its type.

        Args:
            path: File to open. May be malformed when the calling tool
                passes placeholder arguments.

        Raises:
            OSError: If the OS refuses to open the file.
            ValueError: If the path cannot be passed to the OS at all.
        """
        ...
