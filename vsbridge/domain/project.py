"""Project identity and the naming conventions derived from it.

A project is identified by the directory that contains the sentinel marker
folder (Unity's "Assets"). The editor shows the solution name in its main
window title, so the same naming rules build both the solution path and the
title used to recognise an open instance.
"""

from dataclasses import dataclass
from pathlib import Path

from vsbridge.domain.variants import VariantProfile

DEFAULT_MARKER = "Assets"
DEFAULT_SOLUTION_SUFFIX = "-csharp"
DEFAULT_SOLUTION_EXTENSION = "sln"


@dataclass(frozen=True)
class ProjectIdentity:
    """Resolved project root and name.

    Attributes:
        root: Absolute project root directory (parent of the marker folder).
        name: Directory name of the root.

    Raises:
        ValueError: If name is empty.
    """

    root: Path
    name: str

    def __post_init__(self) -> None:
        """Validate the project name."""
        if not self.name:
            raise ValueError("ProjectIdentity name cannot be empty")

    @classmethod
    def from_root(cls, root: Path) -> "ProjectIdentity":
        """Build an identity whose name is the root's directory name."""
        return cls(root=root, name=root.name)


def expected_window_title(
    identity: ProjectIdentity,
    profile: VariantProfile,
    solution_suffix: str = DEFAULT_SOLUTION_SUFFIX,
) -> str:
    """Build the main window title of an editor showing this project.

    This is the only place the title is assembled; instance lookup and
    navigation must both go through it.

    Args:
        identity: Resolved project identity.
        profile: Variant profile of the editor.
        solution_suffix: Token appended to the project name in solution names.

    Returns:
        Title string, e.g. "MyGame-csharp - Microsoft Visual C# 2010 Express".
    """
    return f"{identity.name}{solution_suffix}{profile.title_suffix}"


def solution_path(
    identity: ProjectIdentity,
    solution_suffix: str = DEFAULT_SOLUTION_SUFFIX,
    extension: str = DEFAULT_SOLUTION_EXTENSION,
) -> Path:
    """Path of the C# solution file inside the project root.

    Args:
        identity: Resolved project identity.
        solution_suffix: Token appended to the project name.
        extension: Solution file extension without the dot.

    Returns:
        e.g. <root>/MyGame-csharp.sln
    """
    return identity.root / f"{identity.name}{solution_suffix}.{extension}"
