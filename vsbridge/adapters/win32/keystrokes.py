"""Remote command sink that types into the editor window.

The window is brought to the foreground and the go-to-line keystrokes are
injected with pynput. Windows may refuse the foreground change; the keys are
sent anyway, there is no way to tell whether they arrived.
"""

import logging
from collections.abc import Callable
from typing import Any

from vsbridge.domain.keystrokes import CONFIRM, goto_line_sequence

logger = logging.getLogger(__name__)


def bring_window_to_front(hwnd: int) -> None:
    """Restore a minimised window and make it the foreground window."""
    import win32con
    import win32gui

    try:
        if win32gui.IsIconic(hwnd):
            win32gui.ShowWindow(hwnd, win32con.SW_RESTORE)
        win32gui.SetForegroundWindow(hwnd)
    except Exception as e:
        # Windows can be picky about foreground changes
        logger.debug("Could not focus window %s: %s", hwnd, e)


class KeystrokeCommandSink:
    """RemoteCommandSink implementation using synthetic keyboard input.

    Args:
        keyboard: pynput keyboard Controller (injected in tests).
        keys: pynput Key enum, providing ctrl and enter (injected in tests).
        activate: Function bringing a window handle to the foreground.
    """

    def __init__(
        self,
        keyboard: Any = None,
        keys: Any = None,
        activate: Callable[[int], None] | None = None,
    ) -> None:
        if keyboard is None or keys is None:
            from pynput.keyboard import Controller, Key

            keyboard = keyboard if keyboard is not None else Controller()
            keys = keys if keys is not None else Key
        self._keyboard = keyboard
        self._keys = keys
        self._activate = activate or bring_window_to_front

    def send_goto_line(self, handle: int, line: int) -> None:
        """Focus the window, press Ctrl+G, type the line and press Enter."""
        self._activate(handle)
        for token in goto_line_sequence(line):
            self._send(token)

    def _send(self, token: str) -> None:
        if token == CONFIRM:
            self._keyboard.press(self._keys.enter)
            self._keyboard.release(self._keys.enter)
        elif token.startswith("^"):
            ch = token[1:]
            with self._keyboard.pressed(self._keys.ctrl):
                self._keyboard.press(ch)
                self._keyboard.release(ch)
        else:
            self._keyboard.type(token)
