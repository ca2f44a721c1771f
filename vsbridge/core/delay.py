"""Delay policy before navigating in the editor.

A freshly spawned editor ignores input until it has loaded the solution and
the OS gives no signal when that happens, so navigation after a launch waits
a fixed time. An instance that was already open can take input at once.
"""

from collections.abc import Callable

from vsbridge.domain.config import DEFAULT_GOTO_LINE_DELAY

DelayPolicy = Callable[[bool], float]
"""Maps "was the editor just launched?" to seconds to wait."""


def fixed_launch_delay(seconds: float = DEFAULT_GOTO_LINE_DELAY) -> DelayPolicy:
    """Wait a fixed time after a fresh launch and not at all otherwise.

    Args:
        seconds: Delay applied after a fresh launch.

    Returns:
        DelayPolicy callable.

    Raises:
        ValueError: If seconds is negative.
    """
    if seconds < 0:
        raise ValueError(f"delay cannot be negative, got {seconds}")

    def policy(fresh_launch: bool) -> float:
        return seconds if fresh_launch else 0.0

    return policy


def no_delay(fresh_launch: bool) -> float:
    """Never wait."""
    return 0.0
