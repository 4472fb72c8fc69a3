"""Input history kept in memory for the session and written back at shutdown."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from prompt_toolkit.history import History

logger = logging.getLogger(__name__)


class ShellHistory(History):
    """prompt_toolkit history backed by a plain file, one entry per line.

    Unlike ``FileHistory`` nothing touches the disk until :meth:`save`.
    """

    def __init__(self, path: Path):
        super().__init__()
        self.path = path
        self.entries: list[str] = []
        self.restored = False

    def restore(self) -> bool:
        """Read previous entries from disk. Returns False if there were none to read."""
        try:
            content = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("no history restored from %s: %s", self.path, e)
            return False
        self.entries = content.splitlines()
        self.restored = True
        return True

    def load_history_strings(self) -> Iterable[str]:
        # prompt_toolkit expects newest first
        return list(reversed(self.entries))

    def store_string(self, string: str) -> None:
        self.entries.append(string)

    def save(self) -> str | None:
        """Write all entries to disk. Returns an error message on failure."""
        try:
            self.path.write_text("".join(f"{e}\n" for e in self.entries), encoding="utf-8")
        except OSError as e:
            logger.warning("could not write history file %s: %s", self.path, e)
            return f"Failed to save history: {e}"
        return None
