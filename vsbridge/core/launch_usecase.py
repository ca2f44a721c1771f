"""Launch use case: attach to a running editor or start a new one.

Opening the solution and the script in a single spawn makes the new editor
load the project and show the script at once. When the solution is already
open, the script goes through the shell's file association instead, because
starting the executable again would create a second editor instance.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from vsbridge.core.locator import InstanceLocator
from vsbridge.domain.project import (
    DEFAULT_SOLUTION_EXTENSION,
    DEFAULT_SOLUTION_SUFFIX,
    ProjectIdentity,
    expected_window_title,
    solution_path,
)
from vsbridge.domain.variants import VariantProfile
from vsbridge.ports.install import InstallLocator
from vsbridge.ports.launcher import ProcessLauncher

logger = logging.getLogger(__name__)


class LaunchOutcome(Enum):
    """How the script ended up open."""

    ALREADY_OPEN = "already_open"
    NEWLY_LAUNCHED = "newly_launched"
    STANDALONE = "standalone"


@dataclass
class LaunchRequest:
    """Request to open a script in the editor.

    Attributes:
        profile: Editor variant to use.
        identity: Project the script belongs to, or None outside any project.
        file_path: Script path exactly as received from the calling tool.
    """

    profile: VariantProfile
    identity: ProjectIdentity | None
    file_path: str


@dataclass
class LaunchResponse:
    """Result of a launch request.

    Attributes:
        outcome: Which path was taken.
        window_title: Expected editor title, or None without a project.
        command: argv of the spawned editor, if one was spawned.
        file_opened: False if the standalone open was refused by the OS.
    """

    outcome: LaunchOutcome
    window_title: str | None = None
    command: list[str] | None = None
    file_opened: bool = True


class LaunchCoordinator:
    """Decide between attaching to an open editor and launching a new one.

    Args:
        locator: Finds open editor windows by title.
        installs: Looks up where the editor variant is installed.
        launcher: OS process primitives.
        solution_suffix: Token appended to the project name.
        solution_extension: Solution file extension without the dot.
    """

    def __init__(
        self,
        locator: InstanceLocator,
        installs: InstallLocator,
        launcher: ProcessLauncher,
        solution_suffix: str = DEFAULT_SOLUTION_SUFFIX,
        solution_extension: str = DEFAULT_SOLUTION_EXTENSION,
    ) -> None:
        self._locator = locator
        self._installs = installs
        self._launcher = launcher
        self._solution_suffix = solution_suffix
        self._solution_extension = solution_extension

    def window_title(self, identity: ProjectIdentity, profile: VariantProfile) -> str:
        """Expected title of the editor window showing this project."""
        return expected_window_title(identity, profile, self._solution_suffix)

    def open(self, request: LaunchRequest) -> LaunchResponse:
        """Open the script, reusing a running editor when there is one.

        Args:
            request: Profile, optional project identity and script path.

        Returns:
            LaunchResponse describing what happened.
        """
        if request.identity is None:
            opened = self.open_standalone(request.file_path)
            return LaunchResponse(LaunchOutcome.STANDALONE, file_opened=opened)

        title = self.window_title(request.identity, request.profile)
        try:
            already_open = self._locator.is_open(title)
        except Exception as e:
            # No launch without a window list: it could start a second editor
            logger.debug("Could not enumerate editor windows: %s", e)
            opened = self.open_standalone(request.file_path)
            return LaunchResponse(
                LaunchOutcome.STANDALONE, window_title=title, file_opened=opened
            )

        if already_open:
            logger.debug("Solution already open in '%s'", title)
            opened = self.open_standalone(request.file_path)
            return LaunchResponse(
                LaunchOutcome.ALREADY_OPEN, window_title=title, file_opened=opened
            )

        profile = request.profile
        install_dir = self._installs.find_install_dir(
            profile.registry_key_path, profile.registry_version
        )
        if install_dir is None:
            logger.debug("Visual Studio Express %d is not installed", profile.year)
            opened = self.open_standalone(request.file_path)
            return LaunchResponse(
                LaunchOutcome.STANDALONE, window_title=title, file_opened=opened
            )

        command = [
            str(install_dir / profile.executable),
            str(solution_path(request.identity, self._solution_suffix, self._solution_extension)),
            request.file_path,
        ]
        try:
            self._launcher.spawn(command)
        except OSError as e:
            logger.debug("Could not start %s: %s", command[0], e)
            opened = self.open_standalone(request.file_path)
            return LaunchResponse(
                LaunchOutcome.STANDALONE, window_title=title, file_opened=opened
            )

        logger.info("Launched %s for '%s'", profile.executable, request.identity.name)
        return LaunchResponse(
            LaunchOutcome.NEWLY_LAUNCHED, window_title=title, command=command
        )

    def open_standalone(self, file_path: Path | str) -> bool:
        """Open a file with its default application, never raising.

        The calling tool invokes the bridge with placeholder arguments for
        some of its own actions (e.g. syncing its project files); the OS
        refuses those and the refusal is dropped silently.

        Args:
            file_path: File to open.

        Returns:
            True if the OS accepted the request.
        """
        try:
            self._launcher.open_default(file_path)
        except (OSError, ValueError) as e:
            logger.debug("Ignoring failed open of %r: %s", str(file_path), e)
            return False
        return True
