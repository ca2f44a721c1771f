"""Config domain models for vsbridge.

Configuration is stored in a per-user config.toml and lets the user tune the
bridge without code changes: default editor variant, the delay before
navigating in a freshly launched editor, project naming conventions and
logging. This module defines the validated configuration state.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any

from vsbridge.domain.project import (
    DEFAULT_MARKER,
    DEFAULT_SOLUTION_EXTENSION,
    DEFAULT_SOLUTION_SUFFIX,
)
from vsbridge.domain.variants import DEFAULT_VARIANT, VARIANT_PROFILES

DEFAULT_GOTO_LINE_DELAY = 2.0

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BridgeSettings:
    """Core bridge behavior.

    Attributes:
        default_variant: Variant year used when none is given on the command line.
        goto_line_delay: Seconds to wait before navigating in a freshly launched
                         editor. The editor offers no readiness signal.

    Raises:
        ValueError: If default_variant is unknown or goto_line_delay is negative,
                    or either has the wrong type.
    """

    default_variant: int = DEFAULT_VARIANT
    goto_line_delay: float = DEFAULT_GOTO_LINE_DELAY

    def __post_init__(self) -> None:
        """Validate bridge settings after initialization."""
        if isinstance(self.default_variant, bool) or not isinstance(self.default_variant, int):
            raise ValueError(
                f"default_variant must be an integer year, got {self.default_variant!r}"
            )
        if isinstance(self.goto_line_delay, bool) or not isinstance(
            self.goto_line_delay, (int, float)
        ):
            raise ValueError(
                f"goto_line_delay must be a number of seconds, got {self.goto_line_delay!r}"
            )
        if self.default_variant not in VARIANT_PROFILES:
            raise ValueError(
                f"default_variant must be one of {sorted(VARIANT_PROFILES)}, "
                f"got {self.default_variant}"
            )
        if self.goto_line_delay < 0:
            raise ValueError(
                f"goto_line_delay cannot be negative, got {self.goto_line_delay}"
            )


@dataclass(frozen=True)
class ProjectSettings:
    """Project discovery and naming conventions.

    Attributes:
        marker: Directory name that marks the inside of a project (Unity's "Assets").
        solution_suffix: Token appended to the project name for the solution
                         file and the editor window title.
        solution_extension: Solution file extension without the leading dot.

    Raises:
        ValueError: If marker or solution_extension is empty or malformed,
                    or any field is not a string.
    """

    marker: str = DEFAULT_MARKER
    solution_suffix: str = DEFAULT_SOLUTION_SUFFIX
    solution_extension: str = DEFAULT_SOLUTION_EXTENSION

    def __post_init__(self) -> None:
        """Validate project settings after initialization."""
        for name in ("marker", "solution_suffix", "solution_extension"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if not self.marker:
            raise ValueError("marker cannot be empty")
        if "/" in self.marker or "\\" in self.marker:
            raise ValueError(f"marker must be a single directory name, got {self.marker!r}")
        if not self.solution_extension:
            raise ValueError("solution_extension cannot be empty")
        if self.solution_extension.startswith("."):
            raise ValueError(
                f"solution_extension must not start with '.', got {self.solution_extension!r}"
            )


@dataclass(frozen=True)
class LoggingSettings:
    """Diagnostic logging.

    The calling tool never reads the bridge's output, so logging is silent
    unless a file is configured or --verbose is passed.

    Attributes:
        level: Minimum level written to the log file.
        file: Log file path; empty string disables file logging.

    Raises:
        ValueError: If level is not a standard logging level name or file is
                    not a string.
    """

    level: str = "WARNING"
    file: str = ""

    def __post_init__(self) -> None:
        """Validate logging settings after initialization."""
        if not isinstance(self.level, str) or self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {self.level!r}")
        if not isinstance(self.file, str):
            raise ValueError(f"file must be a path string, got {self.file!r}")

    @property
    def level_number(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.level.upper())


@dataclass(frozen=True)
class BridgeConfig:
    """Complete vsbridge configuration.

    Attributes:
        bridge: Core bridge behavior
        project: Project discovery and naming conventions
        logging: Diagnostic logging
    """

    bridge: BridgeSettings = field(default_factory=BridgeSettings)
    project: ProjectSettings = field(default_factory=ProjectSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @staticmethod
    def default() -> "BridgeConfig":
        """Create a config with all default values."""
        return BridgeConfig(
            bridge=BridgeSettings(),
            project=ProjectSettings(),
            logging=LoggingSettings(),
        )

    @staticmethod
    def from_partial(base: "BridgeConfig", data: dict[str, Any]) -> "BridgeConfig":
        """Overlay raw config data onto an existing config.

        Only keys present in data are replaced; each section is rebuilt so
        its validation runs again.

        Args:
            base: Config providing values for missing keys.
            data: Parsed TOML data, e.g. {"bridge": {"goto_line_delay": 3}}.

        Returns:
            New BridgeConfig with the overrides applied.

        Raises:
            ValueError: If a section is not a table, a key is unknown, or a
                        value fails validation.
        """
        sections: dict[str, Any] = {}
        for section in fields(base):
            overrides = data.get(section.name)
            if overrides is None:
                continue
            if not isinstance(overrides, dict):
                raise ValueError(f"[{section.name}] must be a table")
            current = getattr(base, section.name)
            known = {f.name for f in fields(current)}
            unknown = set(overrides) - known
            if unknown:
                raise ValueError(
                    f"Unknown key(s) in [{section.name}]: {', '.join(sorted(unknown))}"
                )
            try:
                sections[section.name] = replace(current, **overrides)
            except TypeError as e:
                raise ValueError(f"Invalid value in [{section.name}]: {e}") from e
        return replace(base, **sections)
