"""Configuration provider port.

Defines the interface for loading application configuration.
"""

from pathlib import Path
from typing import Protocol

from vsbridge.domain.config import BridgeConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, path: Path | None = None) -> BridgeConfig:
        """Load configuration.

        Args:
            path: Explicit config file. None means the per-user default location.

        Returns:
            BridgeConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if the config file is missing or invalid.
        """
        ...
