"""CLI entry point: banner, logging, and the interactive loop."""

from __future__ import annotations

import logging
import random
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from . import __version__
from .commands import CommandRouter
from .core.config import load_config
from .core.session import SessionState
from .tui import run_repl, set_window_title

console = Console()

TIPS = (
    "Type 'help' to see every built-in command.",
    "alias ll=ls -la makes 'll' run 'ls -la'; save-aliases keeps it for next time.",
    "Anything that isn't a built-in runs in the system shell, with its run time shown.",
    "setprompt changes the symbol at the start of the prompt.",
    "The current git branch shows up in the prompt when you're inside a repository.",
    "Variables set with setenv are inherited by every command you run afterwards.",
)


# ── Banner ──────────────────────────────────────────────────────────


def _print_banner(config):
    console.print()
    title = Text("🐚 Welcome to pocketsh ", style="bold cyan")
    title.append(f"v{__version__}", style="dim")
    console.print(title)
    console.print(f"💡 Tip: {random.choice(TIPS)}", style="bold yellow", markup=False)
    console.print()


def configure_logging(verbose: bool = False) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger = logging.getLogger("pocketsh")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


# ── CLI entry point ─────────────────────────────────────────────────


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="pocketsh")
def main(verbose: bool):
    """pocketsh — a small interactive shell."""
    configure_logging(verbose)
    config = load_config(verbose=verbose)

    state = SessionState.from_config(config)
    router = CommandRouter(state)

    set_window_title("pocketsh")
    code = run_repl(
        config,
        state,
        router,
        print_banner=_print_banner if config.banner else None,
    )
    sys.exit(code)


if __name__ == "__main__":
    main()
