"""Test helper utilities for the vsbridge test suite."""

from tests.helpers.cli_assertions import (
    assert_command_success,
    assert_no_output,
)
from tests.helpers.fakes import (
    FakeProcessDirectory,
    RecordingCommandSink,
    RecordingLauncher,
    RecordingSleep,
    StaticInstallLocator,
)

__all__ = [
    "assert_command_success",
    "assert_no_output",
    "FakeProcessDirectory",
    "RecordingCommandSink",
    "RecordingLauncher",
    "RecordingSleep",
    "StaticInstallLocator",
]
