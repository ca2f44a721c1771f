"""Unit tests for the subprocess-based launcher."""

import subprocess

import pytest

from vsbridge.adapters.launcher import subprocess_launcher
from vsbridge.adapters.launcher.subprocess_launcher import SubprocessLauncher


class RecordingPopen:
    calls: list[tuple[list[str], dict]] = []

    def __init__(self, argv, **kwargs) -> None:
        RecordingPopen.calls.append((argv, kwargs))


@pytest.fixture
def popen(monkeypatch: pytest.MonkeyPatch) -> type[RecordingPopen]:
    RecordingPopen.calls = []
    monkeypatch.setattr(subprocess, "Popen", RecordingPopen)
    return RecordingPopen


class TestSpawn:
    def test_passes_argv_unchanged(self, popen: type[RecordingPopen]) -> None:
        argv = (r"C:\VS\VCSExpress.exe", r"C:\MyGame\MyGame-csharp.sln", "Assets/Foo.cs")

        SubprocessLauncher().spawn(argv)

        assert popen.calls == [(list(argv), {})]

    def test_missing_executable_raises(self, tmp_path) -> None:
        with pytest.raises(OSError):
            SubprocessLauncher().spawn([str(tmp_path / "missing.exe")])


class TestOpenDefault:
    def test_uses_startfile_when_available(self, monkeypatch: pytest.MonkeyPatch) -> None:
        opened: list[str] = []
        monkeypatch.setattr(subprocess_launcher.os, "startfile", opened.append, raising=False)

        SubprocessLauncher().open_default("Foo.cs")

        assert opened == ["Foo.cs"]

    def test_desktop_opener_elsewhere(
        self, monkeypatch: pytest.MonkeyPatch, popen: type[RecordingPopen]
    ) -> None:
        monkeypatch.delattr(subprocess_launcher.os, "startfile", raising=False)
        monkeypatch.setattr(subprocess_launcher.sys, "platform", "linux")

        SubprocessLauncher().open_default("Foo.cs")

        argv, kwargs = popen.calls[0]
        assert argv == ["xdg-open", "Foo.cs"]
        assert kwargs["stdout"] is subprocess.DEVNULL

    def test_macos_opener(
        self, monkeypatch: pytest.MonkeyPatch, popen: type[RecordingPopen]
    ) -> None:
        monkeypatch.delattr(subprocess_launcher.os, "startfile", raising=False)
        monkeypatch.setattr(subprocess_launcher.sys, "platform", "darwin")

        SubprocessLauncher().open_default("Foo.cs")

        assert popen.calls[0][0] == ["open", "Foo.cs"]

    def test_startfile_refusal_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def refuse(path: str) -> None:
            raise OSError(1155, "No application is associated with the specified file")

        monkeypatch.setattr(subprocess_launcher.os, "startfile", refuse, raising=False)

        with pytest.raises(OSError):
            SubprocessLauncher().open_default("-batchmode")
