"""Editor variant profiles.

Each supported Visual Studio Express edition is identified by its release
year. The year selects a VariantProfile describing how to find the installed
executable and how its main window title is built.
"""

from dataclasses import dataclass

from vsbridge.domain.exceptions import UnknownVariantError

DEFAULT_VARIANT = 2010

VCS_EXPRESS_REGISTRY_KEY = r"SOFTWARE\Microsoft\VCSExpress"
WD_EXPRESS_REGISTRY_KEY = r"SOFTWARE\Microsoft\WDExpress"

VCS_EXPRESS_EXE = "VCSExpress.exe"
WD_EXPRESS_EXE = "WDExpress.exe"

VCS_EXPRESS_TITLE = " - Microsoft Visual C# {year} Express"
WD_EXPRESS_TITLE = " - Microsoft Visual Studio Express {year} for Windows Desktop"


@dataclass(frozen=True)
class VariantProfile:
    """Configuration profile for one editor edition.

    Attributes:
        year: Edition year used as the variant selector (e.g., 2010).
        vs_version: Visual Studio version string "major.minor" (e.g., "10.0").
        executable: Executable file name inside the install directory.
        registry_key_path: Registry base path under HKEY_LOCAL_MACHINE.
        desktop: True for the "Express for Windows Desktop" editions.

    Raises:
        ValueError: If vs_version is not in "major.minor" form.
    """

    year: int
    vs_version: str
    executable: str
    registry_key_path: str
    desktop: bool = False

    def __post_init__(self) -> None:
        """Validate the version string."""
        major, sep, minor = self.vs_version.partition(".")
        if not sep or not major.isdigit() or not minor.isdigit():
            raise ValueError(
                f"vs_version must look like 'major.minor', got {self.vs_version!r}"
            )

    @property
    def registry_version(self) -> str:
        """Registry subkey for this version, always "major.minor"."""
        major, _, minor = self.vs_version.partition(".")
        return f"{int(major)}.{int(minor)}"

    @property
    def title_suffix(self) -> str:
        """Trailing part of the editor's main window title."""
        template = WD_EXPRESS_TITLE if self.desktop else VCS_EXPRESS_TITLE
        return template.format(year=self.year)


def _csharp_express(year: int, vs_version: str) -> VariantProfile:
    return VariantProfile(
        year=year,
        vs_version=vs_version,
        executable=VCS_EXPRESS_EXE,
        registry_key_path=VCS_EXPRESS_REGISTRY_KEY,
        desktop=False,
    )


def _desktop_express(year: int, vs_version: str) -> VariantProfile:
    return VariantProfile(
        year=year,
        vs_version=vs_version,
        executable=WD_EXPRESS_EXE,
        registry_key_path=WD_EXPRESS_REGISTRY_KEY,
        desktop=True,
    )


# Visual C# Express 2008/2010, Windows Desktop Express 2012/2013
VARIANT_PROFILES: dict[int, VariantProfile] = {
    2008: _csharp_express(2008, "9.0"),
    2010: _csharp_express(2010, "10.0"),
    2012: _desktop_express(2012, "11.0"),
    2013: _desktop_express(2013, "12.0"),
}


def known_variants() -> list[int]:
    """Return the supported variant years in ascending order."""
    return sorted(VARIANT_PROFILES)


def get_variant_profile(year: int) -> VariantProfile:
    """Look up the profile for a variant year.

    Args:
        year: Edition year.

    Returns:
        The matching VariantProfile.

    Raises:
        UnknownVariantError: If the year is not a supported edition.
    """
    try:
        return VARIANT_PROFILES[year]
    except KeyError:
        supported = ", ".join(str(y) for y in known_variants())
        raise UnknownVariantError(
            f"Unknown editor variant: {year}",
            hint=f"Supported variants: {supported}",
        ) from None
