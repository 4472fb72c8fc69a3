"""Alias store: name -> replacement command line, persisted as ``name=value`` lines."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class AliasStore:
    """Exact-match aliases for whole input lines.

    Example:
        alias ll=ls -la
        Entering 'll' runs 'ls -la'; 'll extra' is left untouched.
    """

    def __init__(self, aliases: dict[str, str] | None = None):
        self._aliases: dict[str, str] = {}
        for name, value in (aliases or {}).items():
            self.set(name, value)

    def set(self, name: str, value: str) -> None:
        self._aliases[name.strip()] = value.strip()

    def lookup(self, raw_input: str) -> str | None:
        return self._aliases.get(raw_input.strip())

    def expand(self, raw_input: str) -> str:
        """Return the alias value for *raw_input*, or the trimmed input itself."""
        expanded = self.lookup(raw_input)
        return expanded if expanded is not None else raw_input.strip()

    def items(self) -> list[tuple[str, str]]:
        return list(self._aliases.items())

    def __len__(self) -> int:
        return len(self._aliases)

    def persist(self, path: Path) -> str:
        """Write every alias to *path*. Returns the message to show the user."""
        content = "".join(f"{name}={value}\n" for name, value in self._aliases.items())
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.warning("could not write alias file %s: %s", path, e)
            return f"Failed to save aliases: {e}"
        logger.debug("wrote %d alias(es) to %s", len(self), path)
        return f"Aliases saved to {path}"

    def load(self, path: Path) -> str:
        """Merge aliases from *path* into the table. Returns the message to show."""
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return "No alias file found."
        except OSError as e:
            logger.warning("could not read alias file %s: %s", path, e)
            return f"Failed to load aliases: {e}"

        loaded = 0
        for line in content.splitlines():
            name, sep, value = line.partition("=")
            if not sep:
                continue
            self.set(name, value)
            loaded += 1
        logger.debug("loaded %d alias(es) from %s", loaded, path)
        return f"Aliases loaded from {path}"
