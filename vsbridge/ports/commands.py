"""Remote command port interface.

The editor has no automation API, so commands are delivered as synthetic
input to its window. The sink is fire-and-forget: nothing is read back.
"""

from typing import Protocol


class RemoteCommandSink(Protocol):
    """Protocol for sending commands to a foreign editor window."""

    def send_goto_line(self, handle: int, line: int) -> None:
        """Bring the window to the foreground and jump to a line.

        Args:
            handle: Window handle returned by the instance locator.
            line: 1-based line number.
        """
        ...
