"""Interactive REPL loop built on prompt_toolkit."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from rich.console import Console
from rich.markup import escape

from ..commands import QUIT, CommandRouter
from ..core.history import ShellHistory
from ..core.session import SessionState
from ..core.utils import git_branch
from .completers import _CommandCompleter
from .prompt_builders import PROMPT_STYLE, _build_prompt

logger = logging.getLogger(__name__)

console = Console()


def run_repl(
    config,
    state: SessionState,
    router: CommandRouter,
    *,
    print_banner: Callable | None = None,
    branch_lookup: Callable[[Path], str | None] = git_branch,
) -> int:
    """Run the session until `exit`, Ctrl-C or Ctrl-D, then save history and aliases."""
    if print_banner:
        print_banner(config)

    console.print(escape(state.aliases.load(state.alias_file)), style="dim", emoji=False)

    history = ShellHistory(config.history_file)
    if not history.restore():
        console.print("No previous history.", style="dim")

    session: PromptSession = PromptSession(
        history=history,
        multiline=False,
        completer=_CommandCompleter(state.aliases),
        auto_suggest=AutoSuggestFromHistory(),
        style=PROMPT_STYLE,
    )

    try:
        _run_repl_loop(
            state,
            router,
            session,
            branch_lookup=branch_lookup,
            verbose=config.verbose,
        )
    finally:
        _shutdown(state, history)
    return 0


def _shutdown(state: SessionState, history: ShellHistory) -> None:
    if error := history.save():
        console.print(escape(error), style="bold", emoji=False)
    console.print(escape(state.aliases.persist(state.alias_file)), style="dim", emoji=False)


def _run_repl_loop(
    state: SessionState,
    router: CommandRouter,
    session,
    *,
    branch_lookup: Callable[[Path], str | None] = git_branch,
    verbose: bool = False,
):
    while True:
        cwd = state.cwd
        prompt = _build_prompt(state.prompt_symbol, cwd, branch_lookup(cwd))

        try:
            user_input = session.prompt(prompt).strip()
        except (KeyboardInterrupt, EOFError):
            console.print()
            break
        except Exception as e:
            logger.debug("line reader failed", exc_info=True)
            console.print(f"Error: {e}", style="bold", markup=False, emoji=False)
            break

        if not user_input:
            continue

        line = state.aliases.expand(user_input)
        if line != user_input:
            logger.debug("alias %r -> %r", user_input, line)

        try:
            result = router.route(line)
        except Exception as e:
            console.print(f"error: {e}", style="bold", markup=False, emoji=False)
            if verbose:
                console.print_exception()
            continue

        if result == QUIT:
            break
        if result:
            console.print(result, highlight=False, emoji=False)
