"""Install locator reading the Windows registry.

Visual Studio Express records its install directory under
HKLM\\<edition key>\\<major.minor>\\InstallDir in the 32-bit registry view.
"""

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

INSTALL_DIR_VALUE = "InstallDir"


class RegistryInstallLocator:
    """InstallLocator implementation using winreg.

    Args:
        registry: winreg module (injected in tests).
    """

    def __init__(self, registry: Any = None) -> None:
        if registry is None:
            import winreg as registry
        self._registry = registry

    def find_install_dir(self, key_path: str, version: str) -> Path | None:
        """Read InstallDir for an edition and version.

        Args:
            key_path: Edition key under HKEY_LOCAL_MACHINE.
            version: "major.minor" version subkey.

        Returns:
            Install directory, or None if the key or value is missing or empty.
        """
        reg = self._registry
        subkey = f"{key_path}\\{version}"
        try:
            with reg.OpenKey(
                reg.HKEY_LOCAL_MACHINE, subkey, 0, reg.KEY_READ | reg.KEY_WOW64_32KEY
            ) as key:
                value, _ = reg.QueryValueEx(key, INSTALL_DIR_VALUE)
        except OSError:
            logger.debug("No %s under HKLM\\%s", INSTALL_DIR_VALUE, subkey)
            return None

        if not value:
            return None
        return Path(value)
