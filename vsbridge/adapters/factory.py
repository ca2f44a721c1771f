"""Factory classes for use case and adapter instantiation.

This module centralizes the creation of the orchestrator and its adapters,
keeping the CLI layer free from direct adapter imports.

The factories use lazy imports so that Windows-only modules (pywin32,
winreg, pynput) are only loaded on Windows.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vsbridge.core.orchestrator import BridgeOrchestrator
    from vsbridge.domain.config import BridgeConfig
    from vsbridge.ports.commands import RemoteCommandSink
    from vsbridge.ports.config import ConfigProvider
    from vsbridge.ports.install import InstallLocator
    from vsbridge.ports.launcher import ProcessLauncher
    from vsbridge.ports.processes import ProcessDirectory


class ConfigFactory:
    """Factory for creating configuration providers."""

    def create_config_provider(self) -> ConfigProvider:
        """Create the TOML configuration provider."""
        from vsbridge.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()


class AdapterFactory:
    """Factory for the OS adapters.

    Args:
        platform: sys.platform value to build for. Defaults to the running
            platform. Anything but "win32" gets the inert adapters.
    """

    def __init__(self, platform: str | None = None) -> None:
        self._platform = platform or sys.platform

    @property
    def is_windows(self) -> bool:
        return self._platform == "win32"

    def create_process_directory(self) -> ProcessDirectory:
        if self.is_windows:
            from vsbridge.adapters.win32.process_directory import Win32ProcessDirectory

            return Win32ProcessDirectory()

        from vsbridge.adapters.null import EmptyProcessDirectory

        return EmptyProcessDirectory()

    def create_command_sink(self) -> RemoteCommandSink:
        if self.is_windows:
            from vsbridge.adapters.win32.keystrokes import KeystrokeCommandSink

            return KeystrokeCommandSink()

        from vsbridge.adapters.null import NullCommandSink

        return NullCommandSink()

    def create_install_locator(self) -> InstallLocator:
        if self.is_windows:
            from vsbridge.adapters.win32.registry import RegistryInstallLocator

            return RegistryInstallLocator()

        from vsbridge.adapters.null import NullInstallLocator

        return NullInstallLocator()

    def create_launcher(self) -> ProcessLauncher:
        from vsbridge.adapters.launcher.subprocess_launcher import SubprocessLauncher

        return SubprocessLauncher()


class UseCaseFactory:
    """Factory for wiring the bridge orchestrator.

    Args:
        config: Loaded configuration.
        adapters: Adapter factory; defaults to one for the running platform.
    """

    def __init__(self, config: BridgeConfig, adapters: AdapterFactory | None = None) -> None:
        self._config = config
        self._adapters = adapters or AdapterFactory()

    def create_orchestrator(
        self, sleep: Callable[[float], None] = time.sleep
    ) -> BridgeOrchestrator:
        """Create the orchestrator with all dependencies.

        Args:
            sleep: Blocking sleep used for the post-launch delay.

        Returns:
            Configured BridgeOrchestrator.
        """
        from vsbridge.core.delay import fixed_launch_delay
        from vsbridge.core.launch_usecase import LaunchCoordinator
        from vsbridge.core.locator import InstanceLocator
        from vsbridge.core.navigator import RemoteNavigator
        from vsbridge.core.orchestrator import BridgeOrchestrator

        project = self._config.project
        locator = InstanceLocator(self._adapters.create_process_directory())
        coordinator = LaunchCoordinator(
            locator=locator,
            installs=self._adapters.create_install_locator(),
            launcher=self._adapters.create_launcher(),
            solution_suffix=project.solution_suffix,
            solution_extension=project.solution_extension,
        )
        navigator = RemoteNavigator(locator, self._adapters.create_command_sink())
        return BridgeOrchestrator(
            coordinator=coordinator,
            navigator=navigator,
            marker=project.marker,
            delay_policy=fixed_launch_delay(self._config.bridge.goto_line_delay),
            sleep=sleep,
        )
