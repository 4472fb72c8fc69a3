"""Run a command line through the host shell, relay its output, report timing."""

from __future__ import annotations

import logging
import signal
import subprocess
import sys
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from rich.console import Console

from ..core.utils import format_duration

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


@dataclass
class ExecResult:
    returncode: int
    stdout: str
    stderr: str
    elapsed: float


def shell_argv(command: str) -> list[str]:
    if sys.platform == "win32":
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


@contextmanager
def _sigint_absorbed() -> Iterator[None]:
    """Keep Ctrl-C from unwinding the shell while a child runs; the child still gets it."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _on_sigint(signum, frame):
        logger.debug("SIGINT while waiting for child process")

    old_handler = signal.getsignal(signal.SIGINT)
    signal.signal(signal.SIGINT, _on_sigint)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, old_handler)


def run_external(command: str, env: dict[str, str] | None = None) -> ExecResult | None:
    """Run *command* with ``sh -c`` (``cmd /C`` on Windows) and wait for it.

    stdout and stderr are captured in full, then written to our own stdout and
    stderr in that order, followed by the elapsed time. The exit status is not
    reported. Returns None if the command could not be started.
    """
    argv = shell_argv(command)
    logger.debug("spawning %s", argv)
    t0 = time.perf_counter()
    try:
        with _sigint_absorbed():
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=env,
            )
    except (OSError, ValueError) as e:
        logger.debug("spawn failed: %s", e)
        console.print(f"Error executing command: {e}", markup=False, highlight=False, emoji=False)
        return None
    elapsed = time.perf_counter() - t0
    logger.debug("exit status %s after %.3fs", result.returncode, elapsed)

    if result.stdout:
        console.out(result.stdout, end="", highlight=False)
    if result.stderr:
        err_console.out(result.stderr, end="", highlight=False)
    console.print(
        f"[Command completed in {format_duration(elapsed)}]",
        style="bold cyan",
        markup=False,
        highlight=False,
    )
    return ExecResult(result.returncode, result.stdout, result.stderr, elapsed)
