"""Install locator port interface.

Finds where an editor edition is installed. On Windows this is a registry
lookup; a missing entry just means the edition is not installed.
"""

from pathlib import Path
from typing import Protocol


class InstallLocator(Protocol):
    """Protocol for looking up an installed editor."""

    def find_install_dir(self, key_path: str, version: str) -> Path | None:
        """Look up the install directory of an editor version.

        Args:
            key_path: Base key for the edition (e.g., "SOFTWARE\\Microsoft\\VCSExpress").
            version: "major.minor" version string (e.g., "10.0").

        Returns:
            Install directory, or None if that version is not installed.
        """
        ...
