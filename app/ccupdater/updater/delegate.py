"""Process delegation to the managed tool.

Spawns the resolved executable with inherited standard streams so the
managed tool keeps its TTY behaviour, forwards termination signals for
the lifetime of the child, and reports the child's exit code.
"""

import logging
import signal
import subprocess
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType

from ccupdater.models.tool import DelegateTarget, ManagedToolReference
from ccupdater.updater.resolver import DelegateNotFoundError

logger = logging.getLogger(__name__)


def _forwarded_signals() -> list[signal.Signals]:
    """Signals forwarded to the child on this platform."""
    names = ("SIGINT", "SIGTERM", "SIGHUP")
    return [getattr(signal, name) for name in names if hasattr(signal, name)]


@contextmanager
def forward_signals(process: subprocess.Popen[bytes]) -> Iterator[None]:
    """Forward termination signals to ``process`` while the block runs.

    Previous handlers are restored on exit, whatever way the block ends.
    Outside the main thread signal handlers cannot be installed, so the
    block runs without forwarding.

    Args:
        process: Child process that receives forwarded signals.
    """
    if threading.current_thread() is not threading.main_thread():
        logger.debug("Not in main thread, signal forwarding disabled")
        yield
        return

    def _forward(signum: int, _frame: FrameType | None) -> None:
        if process.poll() is not None:
            return
        try:
            process.send_signal(signum)
        except (OSError, ValueError) as e:
            logger.debug("Could not forward signal %s to pid %s: %s", signum, process.pid, e)

    previous: dict[signal.Signals, object] = {}
    try:
        for sig in _forwarded_signals():
            previous[sig] = signal.signal(sig, _forward)
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)  # type: ignore[arg-type]


def exit_code_from(returncode: int | None) -> int:
    """Map a child's return code to the wrapper's exit code.

    A child killed by a signal (negative code) or without a code maps to 0.
    """
    if returncode is None or returncode < 0:
        return 0
    return returncode


class ProcessDelegate:
    """Hands process control to the managed tool."""

    def __init__(self, tool: ManagedToolReference) -> None:
        self._tool = tool

    def launch(self, target: DelegateTarget, args: list[str]) -> int:
        """Run the managed tool and wait for it to finish.

        Args:
            target: Resolved executable and invocation prefix.
            args: User arguments forwarded verbatim.

        Returns:
            Exit code the wrapper should terminate with.

        Raises:
            DelegateNotFoundError: If the executable does not exist.
            OSError: For any other spawn failure.
        """
        command = [*target.command, *args]
        logger.debug("Delegating to %s", command)

        try:
            process = subprocess.Popen(command)
        except FileNotFoundError as e:
            raise DelegateNotFoundError(self._tool, f"{target.executable_path} not found") from e

        with forward_signals(process):
            returncode = process.wait()

        logger.debug("%s exited with code %s", self._tool.local_command, returncode)
        return exit_code_from(returncode)
