"""Process directory backed by the Win32 window list.

A process's "main window" is approximated the way .NET does it: a visible
top-level window that has no owner. Windows without a title are skipped,
they can never match an editor title.
"""

import logging
from typing import Any

import psutil

from vsbridge.ports.processes import ProcessWindow

logger = logging.getLogger(__name__)

GW_OWNER = 4  # win32con.GW_OWNER


class Win32ProcessDirectory:
    """ProcessDirectory implementation using pywin32 and psutil.

    Args:
        gui: win32gui module (injected in tests).
        process: win32process module (injected in tests).
    """

    def __init__(self, gui: Any = None, process: Any = None) -> None:
        if gui is None:
            import win32gui as gui
        if process is None:
            import win32process as process
        self._gui = gui
        self._process = process

    def list_processes(self) -> list[ProcessWindow]:
        """Snapshot visible, unowned, titled top-level windows."""
        handles: list[int] = []

        def collect(hwnd: int, _extra: Any) -> bool:
            handles.append(hwnd)
            return True

        self._gui.EnumWindows(collect, None)

        windows = []
        for hwnd in handles:
            if not self._is_main_window(hwnd):
                continue
            title = self._window_text(hwnd)
            if not title:
                continue
            pid = self._window_pid(hwnd)
            windows.append(
                ProcessWindow(
                    title=title,
                    handle=hwnd,
                    pid=pid,
                    process_name=_process_name(pid),
                )
            )
        return windows

    def _is_main_window(self, hwnd: int) -> bool:
        try:
            return bool(self._gui.IsWindowVisible(hwnd)) and not self._gui.GetWindow(
                hwnd, GW_OWNER
            )
        except Exception as e:
            # windows can vanish between EnumWindows and the query
            logger.debug("Skipping window %s: %s", hwnd, e)
            return False

    def _window_text(self, hwnd: int) -> str:
        try:
            return self._gui.GetWindowText(hwnd) or ""
        except Exception as e:
            logger.debug("No title for window %s: %s", hwnd, e)
            return ""

    def _window_pid(self, hwnd: int) -> int | None:
        try:
            _, pid = self._process.GetWindowThreadProcessId(hwnd)
        except Exception as e:
            logger.debug("No pid for window %s: %s", hwnd, e)
            return None
        return int(pid) if pid else None


def _process_name(pid: int | None) -> str:
    if not pid:
        return ""
    try:
        return psutil.Process(pid).name()
    except psutil.Error:
        return ""
