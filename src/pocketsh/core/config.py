"""Configuration: settings.json, env, paths, prompt symbol."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_SYMBOL = "🐚"
ALIAS_FILE = "aliases.txt"
HISTORY_FILE = "history.txt"


@dataclass
class Config:
    prompt_symbol: str = DEFAULT_PROMPT_SYMBOL
    alias_file: Path = field(default_factory=lambda: Path(ALIAS_FILE))
    history_file: Path = field(default_factory=lambda: Path(HISTORY_FILE))
    global_dir: Path = field(default_factory=lambda: Path.home() / ".pocketsh")
    banner: bool = True
    verbose: bool = False

    @property
    def settings_path(self) -> Path:
        return self.global_dir / "settings.json"

    def resolve_paths(self, cwd: Path | None = None) -> None:
        """Pin alias and history paths that were set explicitly to *cwd*.

        The default file names stay relative and follow the working directory
        at the moment each file is read or written.
        """
        base = cwd or Path.cwd()
        if self.alias_file != Path(ALIAS_FILE):
            self.alias_file = (base / self.alias_file).resolve()
        if self.history_file != Path(HISTORY_FILE):
            self.history_file = (base / self.history_file).resolve()


def _apply_settings(config: Config, path: Path) -> None:
    """Apply a single settings.json file to config."""
    if not path.exists():
        return
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", path, e)
        return
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected an object", path)
        return

    if isinstance(data.get("promptSymbol"), str) and data["promptSymbol"]:
        config.prompt_symbol = data["promptSymbol"]
    if isinstance(data.get("aliasFile"), str) and data["aliasFile"]:
        config.alias_file = Path(data["aliasFile"]).expanduser()
    if isinstance(data.get("historyFile"), str) and data["historyFile"]:
        config.history_file = Path(data["historyFile"]).expanduser()
    if isinstance(data.get("banner"), bool):
        config.banner = data["banner"]


def load_config(verbose: bool = False, cwd: Path | None = None) -> Config:
    """Load config with priority: CLI args > env > .env > settings.json > defaults."""
    load_dotenv()

    config = Config()
    config.verbose = verbose

    _apply_settings(config, config.settings_path)

    if symbol := os.getenv("POCKETSH_PROMPT"):
        config.prompt_symbol = symbol
    if alias_file := os.getenv("POCKETSH_ALIAS_FILE"):
        config.alias_file = Path(alias_file).expanduser()
    if history_file := os.getenv("POCKETSH_HISTORY_FILE"):
        config.history_file = Path(history_file).expanduser()

    config.resolve_paths(cwd)
    logger.debug("alias file: %s, history file: %s", config.alias_file, config.history_file)
    return config
