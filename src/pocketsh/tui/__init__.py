"""Public API for the pocketsh TUI package."""

from .prompt_builders import set_window_title
from .repl import run_repl

__all__ = ["run_repl", "set_window_title"]
