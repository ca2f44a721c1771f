"""Editor instance discovery by main window title."""

import logging

from vsbridge.ports.processes import ProcessDirectory

logger = logging.getLogger(__name__)


class InstanceLocator:
    """Find a running editor whose main window title matches exactly.

    Titles are compared with plain string equality: case-sensitive, no
    trimming. If several windows share the title, the first one listed
    wins. The result is a snapshot; the window may close right after.
    """

    def __init__(self, directory: ProcessDirectory) -> None:
        self._directory = directory

    def find(self, title: str) -> int | None:
        """Return the window handle of the matching instance.

        Args:
            title: Expected main window title.

        Returns:
            Window handle, or None if no window has that title.
        """
        if not title:
            return None

        for window in self._directory.list_processes():
            if window.title == title:
                logger.debug(
                    "Found '%s' (pid=%s, handle=%s)", title, window.pid, window.handle
                )
                return window.handle

        logger.debug("No window titled '%s'", title)
        return None

    def is_open(self, title: str) -> bool:
        """Check whether an instance with this title is running."""
        return self.find(title) is not None
