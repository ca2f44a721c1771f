"""TOML-based configuration provider.

Loads configuration from the per-user config.toml.

Config loading priority (highest to lowest):
1. Explicit path (--config)
2. $VSBRIDGE_CONFIG
3. Per-user config.toml (%APPDATA% or XDG config dir)
4. Built-in defaults
"""

import logging
from pathlib import Path

from vsbridge.domain.config import BridgeConfig
from vsbridge.domain.exceptions import InvalidConfigError
from vsbridge.shared.config_io import get_config_path, load_config

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from a TOML file.

    A missing file means defaults. An invalid file is reported with a
    warning and ignored: the bridge has to keep working for the calling
    tool even when the user's config is broken.
    """

    def load(self, path: Path | None = None) -> BridgeConfig:
        """Load configuration, falling back to defaults.

        Args:
            path: Explicit config file, or None for the per-user location.

        Returns:
            BridgeConfig instance with file values or defaults
        """
        config_path = path if path is not None else get_config_path()

        if not config_path.exists():
            logger.debug("No config at %s, using defaults", config_path)
            return BridgeConfig.default()

        try:
            config = load_config(config_path)
        except (FileNotFoundError, InvalidConfigError) as e:
            logger.warning("Ignoring config at %s: %s", config_path, e)
            return BridgeConfig.default()

        logger.debug("Loaded config from %s", config_path)
        return config
