"""Path helpers, duration formatting, git branch lookup."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def format_duration(seconds: float) -> str:
    """Format an elapsed time with sub-second precision: '15.30µs', '1.25ms', '2.00s'."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"


def git_branch(cwd: Path | None = None) -> str | None:
    """Return the checked-out branch of the repo containing *cwd*, or None.

    Detached and unborn HEADs have no branch name and yield None.
    """
    try:
        r = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            capture_output=True,
            text=True,
            timeout=2,
            cwd=cwd,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("git branch lookup failed: %s", e)
        return None
    if r.returncode != 0:
        return None
    branch = r.stdout.strip()
    if not branch or branch == "HEAD":
        return None
    return branch


def short_cwd(p: Path) -> str:
    """Return path relative to home directory, using ~ prefix."""
    try:
        rel = p.relative_to(Path.home())
        return f"~/{rel}" if str(rel) != "." else "~"
    except ValueError:
        return str(p)
