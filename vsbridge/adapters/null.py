"""Inert adapters for platforms without Win32 window automation.

With these wired in, no editor window is ever found and no edition is ever
installed, so every script is opened with its default application.
"""

from pathlib import Path

from vsbridge.ports.processes import ProcessWindow


class EmptyProcessDirectory:
    """ProcessDirectory that lists no windows."""

    def list_processes(self) -> list[ProcessWindow]:
        return []


class NullInstallLocator:
    """InstallLocator that finds nothing."""

    def find_install_dir(self, key_path: str, version: str) -> Path | None:
        return None


class NullCommandSink:
    """RemoteCommandSink that drops every command."""

    def send_goto_line(self, handle: int, line: int) -> None:
        return None
