"""CommandRouter: run built-ins against the session, hand everything else to the host shell."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.markup import escape

from ..core.session import SessionState
from ..tools import list_directory, run_external, shell_info
from .parser import (
    COMMANDS,
    USAGE,
    Builtin,
    BuiltinCall,
    EmptyLine,
    ExternalCall,
    ParsedCommand,
    parse,
)

logger = logging.getLogger(__name__)

QUIT = "quit"

IDENTITY = "🐚 You are running pocketsh!"


class CommandRouter:
    """Dispatch one (already alias-expanded) line.

    ``route`` returns rich markup to print, ``QUIT`` to end the session, or
    None when there is nothing left to print.
    """

    def __init__(self, session: SessionState, executor: Callable = run_external):
        self.session = session
        self.executor = executor

    def route(self, line: str) -> str | None:
        return self.dispatch(parse(line))

    def dispatch(self, command: ParsedCommand) -> str | None:
        if isinstance(command, EmptyLine):
            return None
        if isinstance(command, ExternalCall):
            logger.debug("external %s: %s", command.name, command.line)
            self.executor(command.line, env=self.session.env.snapshot())
            return None
        return self._builtin(command)

    def _builtin(self, call: BuiltinCall) -> str | None:
        kind, args = call.kind, call.args
        session = self.session

        if kind is Builtin.EXIT:
            return QUIT

        elif kind is Builtin.HELP:
            return help_text()

        elif kind is Builtin.LS:
            return list_directory(session.cwd)

        elif kind is Builtin.CD:
            if not args:
                return USAGE[kind]
            try:
                session.chdir(args[0])
            except OSError as e:
                return escape(f"cd: {e}")
            return None

        elif kind is Builtin.SETENV:
            if len(args) < 2:
                return USAGE[kind]
            name, value = args[0], args[1]
            try:
                session.env.set(name, value)
            except ValueError as e:
                return escape(f"setenv: {e}")
            return escape(f"Set {name}={value}")

        elif kind is Builtin.GETENV:
            if not args:
                return USAGE[kind]
            name = args[0]
            value = session.env.get(name)
            if value is None:
                return escape(f"{name} is not set")
            return escape(f"{name}={value}")

        elif kind is Builtin.ALIAS:
            # the value runs to the end of the line: `alias ll=ls -la`
            if not args or "=" not in args[0]:
                return USAGE[kind]
            name, _, value = call.rest.partition("=")
            session.aliases.set(name, value)
            return escape(f"Alias set: {name.strip()}='{value.strip()}'")

        elif kind is Builtin.SAVE_ALIASES:
            return escape(session.aliases.persist(session.alias_file))

        elif kind is Builtin.LOAD_ALIASES:
            return escape(session.aliases.load(session.alias_file))

        elif kind is Builtin.SETPROMPT:
            if not args:
                return USAGE[kind]
            session.prompt_symbol = args[0]
            return escape(f"Prompt symbol set to '{args[0]}'")

        elif kind is Builtin.SHELLINFO:
            return shell_info()

        elif kind is Builtin.WHOAMI:
            return IDENTITY

        raise AssertionError(f"unhandled built-in: {kind}")


def help_text() -> str:
    lines = ["Available commands:"]
    for usage, desc in COMMANDS.items():
        lines.append(f"  [bold]{escape(usage):<18}[/bold] {desc}")
    lines.append("  Any other command is run in the system shell.")
    return "\n".join(lines)
