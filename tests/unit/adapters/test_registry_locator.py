"""Unit tests for the registry-backed install locator."""

from pathlib import Path
from types import SimpleNamespace

from vsbridge.adapters.win32.registry import INSTALL_DIR_VALUE, RegistryInstallLocator


class FakeKey:
    def __init__(self, values: dict[str, str]) -> None:
        self.values = values

    def __enter__(self) -> "FakeKey":
        return self

    def __exit__(self, *exc: object) -> None:
        return None


class FakeWinreg(SimpleNamespace):
    """Subset of winreg over an in-memory HKLM."""

    def __init__(self, keys: dict[str, dict[str, str]]) -> None:
        super().__init__(
            HKEY_LOCAL_MACHINE="HKLM",
            KEY_READ=0x20019,
            KEY_WOW64_32KEY=0x0200,
        )
        self.keys = keys
        self.opened: list[tuple[str, str, int]] = []

    def OpenKey(self, root: str, subkey: str, reserved: int, access: int) -> FakeKey:
        self.opened.append((root, subkey, access))
        if subkey not in self.keys:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        return FakeKey(self.keys[subkey])

    def QueryValueEx(self, key: FakeKey, name: str) -> tuple[str, int]:
        if name not in key.values:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        return key.values[name], 1


IDE_DIR = r"C:\Program Files (x86)\Microsoft Visual Studio 10.0\Common7\IDE"


class TestRegistryInstallLocator:
    def test_reads_install_dir(self) -> None:
        registry = FakeWinreg(
            {r"SOFTWARE\Microsoft\VCSExpress\10.0": {INSTALL_DIR_VALUE: IDE_DIR}}
        )

        result = RegistryInstallLocator(registry).find_install_dir(
            r"SOFTWARE\Microsoft\VCSExpress", "10.0"
        )

        assert result == Path(IDE_DIR)

    def test_uses_32bit_view_of_hklm(self) -> None:
        registry = FakeWinreg({})

        RegistryInstallLocator(registry).find_install_dir(r"SOFTWARE\Microsoft\WDExpress", "12.0")

        assert registry.opened == [
            ("HKLM", r"SOFTWARE\Microsoft\WDExpress\12.0", 0x20019 | 0x0200)
        ]

    def test_missing_key(self) -> None:
        locator = RegistryInstallLocator(FakeWinreg({}))

        assert locator.find_install_dir(r"SOFTWARE\Microsoft\VCSExpress", "9.0") is None

    def test_missing_value(self) -> None:
        registry = FakeWinreg({r"SOFTWARE\Microsoft\VCSExpress\10.0": {}})

        result = RegistryInstallLocator(registry).find_install_dir(
            r"SOFTWARE\Microsoft\VCSExpress", "10.0"
        )

        assert result is None

    def test_empty_value_means_not_installed(self) -> None:
        registry = FakeWinreg({r"SOFTWARE\Microsoft\VCSExpress\10.0": {INSTALL_DIR_VALUE: ""}})

        result = RegistryInstallLocator(registry).find_install_dir(
            r"SOFTWARE\Microsoft\VCSExpress", "10.0"
        )

        assert result is None
