"""SessionState: everything the command handlers are allowed to read or change."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .aliases import AliasStore
from .config import ALIAS_FILE, DEFAULT_PROMPT_SYMBOL
from .env import Environment, OsEnvironment

if TYPE_CHECKING:
    from .config import Config


@dataclass
class SessionState:
    aliases: AliasStore = field(default_factory=AliasStore)
    env: Environment = field(default_factory=OsEnvironment)
    prompt_symbol: str = DEFAULT_PROMPT_SYMBOL
    alias_file: Path = field(default_factory=lambda: Path(ALIAS_FILE))

    @classmethod
    def from_config(cls, config: Config, env: Environment | None = None) -> SessionState:
        return cls(
            env=env or OsEnvironment(),
            prompt_symbol=config.prompt_symbol,
            alias_file=config.alias_file,
        )

    @property
    def cwd(self) -> Path:
        return Path.cwd()

    def chdir(self, path: str) -> None:
        """Change the process working directory. Raises OSError, leaving cwd as it was."""
        os.chdir(path)
