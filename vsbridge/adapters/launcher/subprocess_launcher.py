"""Process launcher using subprocess and the shell's file associations."""

import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


class SubprocessLauncher:
    """ProcessLauncher implementation.

    Spawning never waits for the child. Opening by association uses
    os.startfile on Windows and the desktop opener elsewhere.
    """

    def spawn(self, argv: Sequence[str]) -> None:
        """Start an executable with arguments.

        Raises:
            OSError: If the executable cannot be started.
        """
        subprocess.Popen(list(argv))

    def open_default(self, path: Path | str) -> None:
        """Open a file with its associated application.

        Raises:
            OSError: If the OS refuses to open the file.
            ValueError: If the path contains characters the OS cannot take.
        """
        target = str(path)
        if hasattr(os, "startfile"):
            os.startfile(target)  # type: ignore[attr-defined]
            return

        opener = "open" if sys.platform == "darwin" else "xdg-open"
        subprocess.Popen(
            [opener, target],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
