"""Remote "go to line" navigation."""

import logging

from vsbridge.core.locator import InstanceLocator
from vsbridge.ports.commands import RemoteCommandSink

logger = logging.getLogger(__name__)


class RemoteNavigator:
    """Send a go-to-line command to the editor window with a given title.

    Fire-and-forget: the sink's result is never verified. A missing window
    is not an error, the editor may simply not be discoverable by title.
    """

    def __init__(self, locator: InstanceLocator, sink: RemoteCommandSink) -> None:
        self._locator = locator
        self._sink = sink

    def goto_line(self, title: str, line: int) -> bool:
        """Jump to a line in the editor showing the project.

        Args:
            title: Expected main window title, from expected_window_title().
            line: 1-based line number.

        Returns:
            True if a window was found and the command was sent.

        Raises:
            ValueError: If line is less than 1.
        """
        if line < 1:
            raise ValueError(f"line must be >= 1, got {line}")

        handle = self._locator.find(title)
        if handle is None:
            logger.debug("Skipping go to line %d: no window titled '%s'", line, title)
            return False

        self._sink.send_goto_line(handle, line)
        logger.info("Sent go to line %d to '%s'", line, title)
        return True
