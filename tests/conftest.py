"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path

import pytest

from tests.helpers import (
    FakeProcessDirectory,
    RecordingCommandSink,
    RecordingLauncher,
    RecordingSleep,
    StaticInstallLocator,
)
from vsbridge.core.delay import fixed_launch_delay
from vsbridge.core.launch_usecase import LaunchCoordinator
from vsbridge.core.locator import InstanceLocator
from vsbridge.core.navigator import RemoteNavigator
from vsbridge.core.orchestrator import BridgeOrchestrator

# ============================================================================
# Logging isolation
# ============================================================================
# The CLI attaches handlers to the "vsbridge" logger. Remove them after each
# test so one test's --verbose or log file does not leak into the next.


@pytest.fixture(autouse=True)
def reset_vsbridge_logger():
    """Restore the package logger to its pristine state after each test."""
    yield
    logger = logging.getLogger("vsbridge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


# ============================================================================
# Project layout helpers
# ============================================================================


def create_unity_project(base: Path, name: str = "MyGame") -> Path:
    """Create a Unity-like project tree with one script.

    Layout:
        <base>/<name>/Assets/Scripts/Foo.cs

    Args:
        base: Directory to create the project in.
        name: Project (root directory) name.

    Returns:
        Path to Foo.cs.
    """
    scripts = base / name / "Assets" / "Scripts"
    scripts.mkdir(parents=True)
    script = scripts / "Foo.cs"
    script.write_text("public class Foo {}\n")
    return script


@pytest.fixture
def unity_script(tmp_path: Path) -> Path:
    """Path to MyGame/Assets/Scripts/Foo.cs inside tmp_path."""
    return create_unity_project(tmp_path)


@pytest.fixture
def loose_script(tmp_path: Path) -> Path:
    """A script that is not inside any Unity project."""
    script = tmp_path / "scratch" / "Loose.cs"
    script.parent.mkdir(parents=True)
    script.write_text("class Loose {}\n")
    return script


# ============================================================================
# Port fakes
# ============================================================================


@pytest.fixture
def directory() -> FakeProcessDirectory:
    return FakeProcessDirectory()


@pytest.fixture
def sink() -> RecordingCommandSink:
    return RecordingCommandSink()


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    """Fake Visual Studio Express install directory."""
    path = tmp_path / "VSExpress" / "IDE"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def installs(install_dir: Path) -> StaticInstallLocator:
    return StaticInstallLocator(install_dir)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def coordinator(
    directory: FakeProcessDirectory,
    installs: StaticInstallLocator,
    launcher: RecordingLauncher,
) -> LaunchCoordinator:
    return LaunchCoordinator(InstanceLocator(directory), installs, launcher)


@pytest.fixture
def orchestrator(
    directory: FakeProcessDirectory,
    sink: RecordingCommandSink,
    coordinator: LaunchCoordinator,
    sleep: RecordingSleep,
) -> BridgeOrchestrator:
    """Orchestrator wired to the fakes, with the default 2s launch delay."""
    navigator = RemoteNavigator(InstanceLocator(directory), sink)
    return BridgeOrchestrator(
        coordinator=coordinator,
        navigator=navigator,
        delay_policy=fixed_launch_delay(2.0),
        sleep=sleep,
    )
