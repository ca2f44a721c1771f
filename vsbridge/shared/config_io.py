"""Configuration I/O utilities for reading and writing TOML config files.

This module handles reading BridgeConfig from TOML and writing the default file.
"""

import os
import platform
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from vsbridge.domain.config import BridgeConfig
from vsbridge.domain.exceptions import InvalidConfigError

CONFIG_ENV_VAR = "VSBRIDGE_CONFIG"


def get_config_path() -> Path:
    """Get the path to the per-user config file.

    Resolution order:
    - $VSBRIDGE_CONFIG if set
    - Windows: %APPDATA%/vsbridge/config.toml
    - Linux/macOS: $XDG_CONFIG_HOME/vsbridge/config.toml or ~/.config/vsbridge/config.toml

    Returns:
        Path to the config file (may not exist)
    """
    override = os.environ.get(CONFIG_ENV_VAR, "")
    if override:
        return Path(override)

    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "vsbridge" / "config.toml"
        return Path.home() / ".config" / "vsbridge" / "config.toml"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "vsbridge" / "config.toml"
        return Path.home() / ".config" / "vsbridge" / "config.toml"


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        InvalidConfigError: If config file is malformed, not UTF-8 or unreadable
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError(
            f"Invalid TOML in config file {path}: {e}",
            hint="Fix the syntax or delete the file to use defaults",
        ) from e
    except UnicodeDecodeError as e:
        raise InvalidConfigError(
            f"Config file {path} is not UTF-8 encoded: {e}",
            hint="Save the file as UTF-8",
        ) from e
    except OSError as e:
        raise InvalidConfigError(f"Cannot read config file {path}: {e}") from e


def load_config(path: Path) -> BridgeConfig:
    """Load configuration from a TOML file on top of the defaults.

    Args:
        path: Path to config.toml file

    Returns:
        Parsed BridgeConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        InvalidConfigError: If config file is malformed or has invalid values
    """
    data = load_config_data(path)
    try:
        return BridgeConfig.from_partial(BridgeConfig.default(), data)
    except ValueError as e:
        raise InvalidConfigError(f"Invalid value in config file {path}: {e}") from e


def config_to_data(config: BridgeConfig) -> dict[str, Any]:
    """Convert a BridgeConfig to plain TOML-serializable data."""
    return {
        "bridge": {
            "default_variant": config.bridge.default_variant,
            "goto_line_delay": config.bridge.goto_line_delay,
        },
        "project": {
            "marker": config.project.marker,
            "solution_suffix": config.project.solution_suffix,
            "solution_extension": config.project.solution_extension,
        },
        "logging": {
            "level": config.logging.level,
            "file": config.logging.file,
        },
    }


def create_default_config_file(path: Path) -> None:
    """Create a default config.toml file with sensible defaults and comments.

    Args:
        path: Destination path for config.toml
    """
    defaults = BridgeConfig.default()
    # Values go through tomli_w so quoting and escaping stay valid TOML
    values = {
        section: tomli_w.dumps(table).strip()
        for section, table in config_to_data(defaults).items()
    }

    template = f"""\
# vsbridge configuration
# Created by: vsbridge --init-config

[bridge]
# Visual Studio Express edition used when the caller passes none
# Options: 2008, 2010 (Visual C# Express), 2012, 2013 (Express for Windows Desktop)
# Seconds to wait before sending "go to line" to an editor that was just
# launched. Too short and the command is ignored while the solution loads.
{values["bridge"]}

[project]
# Folder that marks the inside of a Unity project
# Solution naming: <project><solution_suffix>.<solution_extension>
{values["project"]}

[logging]
# The calling tool never shows the bridge's output. Set file to a path to
# keep a log; level is one of DEBUG, INFO, WARNING, ERROR, CRITICAL.
{values["logging"]}
"""

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        f.write(template)
