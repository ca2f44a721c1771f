"""Bridge orchestration for a single invocation.

One invocation runs the state machine below once, start to finish, with no
retries. The only blocking step is the delay before navigating in an editor
that was just launched.

    START
      -> IDENTITY_RESOLVED | NO_IDENTITY
      -> INSTANCE_FOUND | INSTANCE_NOT_FOUND | NOT_APPLICABLE
      -> ATTACHED_ONLY | LAUNCHED_NEW | FILE_OPENED_STANDALONE
      -> LINE_NAVIGATED | NO_LINE_REQUESTED | NAVIGATION_SKIPPED
      -> DONE
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from vsbridge.core.delay import DelayPolicy, fixed_launch_delay
from vsbridge.core.identity import resolve_project_identity
from vsbridge.core.launch_usecase import (
    LaunchCoordinator,
    LaunchOutcome,
    LaunchRequest,
)
from vsbridge.core.navigator import RemoteNavigator
from vsbridge.core.use_case_errors import format_error_message, log_use_case_error
from vsbridge.domain.project import DEFAULT_MARKER, ProjectIdentity
from vsbridge.domain.variants import DEFAULT_VARIANT, get_variant_profile

logger = logging.getLogger(__name__)


class BridgeState(Enum):
    """States visited while handling one invocation."""

    START = "start"
    IDENTITY_RESOLVED = "identity_resolved"
    NO_IDENTITY = "no_identity"
    INSTANCE_FOUND = "instance_found"
    INSTANCE_NOT_FOUND = "instance_not_found"
    NOT_APPLICABLE = "not_applicable"
    ATTACHED_ONLY = "attached_only"
    LAUNCHED_NEW = "launched_new"
    FILE_OPENED_STANDALONE = "file_opened_standalone"
    LINE_NAVIGATED = "line_navigated"
    NO_LINE_REQUESTED = "no_line_requested"
    NAVIGATION_SKIPPED = "navigation_skipped"
    DONE = "done"


_OUTCOME_STATES = {
    LaunchOutcome.ALREADY_OPEN: BridgeState.ATTACHED_ONLY,
    LaunchOutcome.NEWLY_LAUNCHED: BridgeState.LAUNCHED_NEW,
    LaunchOutcome.STANDALONE: BridgeState.FILE_OPENED_STANDALONE,
}


@dataclass
class BridgeRequest:
    """Request to open a script and optionally jump to a line.

    Attributes:
        file_path: Script path exactly as received from the calling tool.
        line: 1-based line to navigate to, or None to skip navigation.
        variant: Editor variant year.
    """

    file_path: str
    line: int | None = None
    variant: int = DEFAULT_VARIANT


@dataclass
class BridgeResponse:
    """Outcome of one invocation.

    Attributes:
        states: State machine path, START first.
        identity: Resolved project, or None outside any project.
        window_title: Expected editor title, or None without a project.
        launch_outcome: How the script was opened, or None on error.
        delay_seconds: Time slept before navigating.
        success: False if an unexpected error stopped the run.
        error: Error message when success is False.
    """

    states: list[BridgeState] = field(default_factory=list)
    identity: ProjectIdentity | None = None
    window_title: str | None = None
    launch_outcome: LaunchOutcome | None = None
    delay_seconds: float = 0.0
    success: bool = True
    error: str | None = None

    @property
    def final_state(self) -> BridgeState | None:
        """Last state reached."""
        return self.states[-1] if self.states else None

    @property
    def navigated(self) -> bool:
        """Whether a go-to-line command was sent."""
        return BridgeState.LINE_NAVIGATED in self.states

    @classmethod
    def create_error(cls, message: str, states: list[BridgeState]) -> "BridgeResponse":
        """Create an error response.

        Args:
            message: Error message describing what went wrong.
            states: States reached before the failure.

        Returns:
            BridgeResponse with success=False.
        """
        return cls(states=list(states), success=False, error=message)


class BridgeOrchestrator:
    """Run the attach-or-launch-then-navigate sequence for one invocation.

    Nothing raised by collaborators escapes execute(); failures are logged
    and reported in the response, since the calling tool ignores both
    output and exit status.

    Args:
        coordinator: Attach-or-launch decision and standalone open.
        navigator: Go-to-line command delivery.
        marker: Directory name marking the inside of a project.
        delay_policy: Seconds to wait before navigating, given whether the
            editor was just launched.
        sleep: Blocking sleep function.
    """

    def __init__(
        self,
        coordinator: LaunchCoordinator,
        navigator: RemoteNavigator,
        marker: str = DEFAULT_MARKER,
        delay_policy: DelayPolicy | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._coordinator = coordinator
        self._navigator = navigator
        self._marker = marker
        self._delay_policy = delay_policy or fixed_launch_delay()
        self._sleep = sleep

    def execute(self, request: BridgeRequest) -> BridgeResponse:
        """Handle one invocation.

        Args:
            request: Script path, optional line and variant.

        Returns:
            BridgeResponse with the state path and outcome.
        """
        states = [BridgeState.START]
        try:
            return self._run(request, states)
        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception as e:
            log_use_case_error(e, "open")
            return BridgeResponse.create_error(format_error_message(e, "open"), states)

    def _run(self, request: BridgeRequest, states: list[BridgeState]) -> BridgeResponse:
        profile = get_variant_profile(request.variant)

        identity = resolve_project_identity(request.file_path, self._marker)
        if identity is None:
            states += [BridgeState.NO_IDENTITY, BridgeState.NOT_APPLICABLE]
        else:
            states.append(BridgeState.IDENTITY_RESOLVED)

        launch = self._coordinator.open(LaunchRequest(profile, identity, request.file_path))
        if identity is not None:
            if launch.outcome is LaunchOutcome.ALREADY_OPEN:
                states.append(BridgeState.INSTANCE_FOUND)
            else:
                states.append(BridgeState.INSTANCE_NOT_FOUND)
        states.append(_OUTCOME_STATES[launch.outcome])

        delay = 0.0
        if request.line is None or request.line < 1:
            states.append(BridgeState.NO_LINE_REQUESTED)
        elif launch.outcome is LaunchOutcome.STANDALONE or launch.window_title is None:
            states.append(BridgeState.NAVIGATION_SKIPPED)
        else:
            delay = self._delay_policy(launch.outcome is LaunchOutcome.NEWLY_LAUNCHED)
            if delay > 0:
                logger.debug("Waiting %.1fs for the editor to load", delay)
                self._sleep(delay)
            if self._navigator.goto_line(launch.window_title, request.line):
                states.append(BridgeState.LINE_NAVIGATED)
            else:
                states.append(BridgeState.NAVIGATION_SKIPPED)

        states.append(BridgeState.DONE)
        logger.debug("State path: %s", " -> ".join(s.name for s in states))

        return BridgeResponse(
            states=list(states),
            identity=identity,
            window_title=launch.window_title,
            launch_outcome=launch.outcome,
            delay_seconds=delay,
        )
