"""Project identity discovery.

Functions for finding the Unity project a script belongs to by walking up
from the script path, similar to how git finds .git/.
"""

import logging
import os
from pathlib import Path

from vsbridge.domain.project import DEFAULT_MARKER, ProjectIdentity

logger = logging.getLogger(__name__)


def _absolute(path: Path | str) -> Path:
    # normpath collapses ".." without following symlinks, so the project
    # name stays the one the editor shows
    return Path(os.path.normpath(Path(path).absolute()))


def find_project_root(file_path: Path | str, marker: str = DEFAULT_MARKER) -> Path | None:
    """Find the project root by walking up directories.

    The path itself and each of its ancestors are compared against marker
    (exact, case-sensitive). The parent of the first match is the root.
    The path does not need to exist.

    Args:
        file_path: Script path as passed by the calling tool.
        marker: Directory name marking the inside of a project.

    Returns:
        Absolute project root, or None if no ancestor is named marker or the
        marker sits directly under the filesystem root.
    """
    current = _absolute(file_path)

    while True:
        parent = current.parent
        if parent == current:
            # Reached filesystem root without finding the marker
            return None

        if current.name == marker:
            if not parent.name:
                return None
            return parent

        current = parent


def resolve_project_identity(
    file_path: Path | str, marker: str = DEFAULT_MARKER
) -> ProjectIdentity | None:
    """Derive the project identity of a script.

    Args:
        file_path: Script path as passed by the calling tool.
        marker: Directory name marking the inside of a project.

    Returns:
        ProjectIdentity, or None when the file is not inside a project.
        None is a normal outcome: callers open the file standalone.
    """
    root = find_project_root(file_path, marker)
    if root is None:
        logger.debug("No '%s' ancestor for %s", marker, file_path)
        return None

    identity = ProjectIdentity.from_root(root)
    logger.debug("Resolved project '%s' at %s", identity.name, identity.root)
    return identity
