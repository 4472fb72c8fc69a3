"""Parse an input line into one of: empty, built-in call, external command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Builtin(str, Enum):
    EXIT = "exit"
    HELP = "help"
    LS = "ls"
    CD = "cd"
    SETENV = "setenv"
    GETENV = "getenv"
    ALIAS = "alias"
    SAVE_ALIASES = "save-aliases"
    LOAD_ALIASES = "load-aliases"
    SETPROMPT = "setprompt"
    SHELLINFO = "shellinfo"
    WHOAMI = "whoami-shell"


# usage -> description, in the order `help` shows them
COMMANDS = {
    "ls": "List files in the current directory (with colors)",
    "cd <dir>": "Change current directory",
    "setenv VAR VAL": "Set environment variable",
    "getenv VAR": "Get environment variable",
    "alias a=b": "Set alias a for command b",
    "save-aliases": "Save current aliases to disk",
    "load-aliases": "Load aliases from disk",
    "setprompt <sym>": "Set custom prompt symbol",
    "shellinfo": "Show shell and system info",
    "whoami-shell": "Show shell identity",
    "help": "Show this help",
    "exit": "Exit the shell",
}

USAGE = {
    Builtin.CD: "Usage: cd <directory>",
    Builtin.SETENV: "Usage: setenv VAR VALUE",
    Builtin.GETENV: "Usage: getenv VAR",
    Builtin.ALIAS: "Usage: alias name=command",
    Builtin.SETPROMPT: "Usage: setprompt <symbol>",
}

_BUILTINS = {b.value: b for b in Builtin}


@dataclass(frozen=True)
class EmptyLine:
    pass


@dataclass(frozen=True)
class BuiltinCall:
    kind: Builtin
    args: tuple[str, ...] = ()
    rest: str = ""  # raw text after the command name


@dataclass(frozen=True)
class ExternalCall:
    line: str

    @property
    def name(self) -> str:
        return self.line.split(maxsplit=1)[0]


ParsedCommand = EmptyLine | BuiltinCall | ExternalCall


def builtin_names() -> list[str]:
    return list(_BUILTINS)


def parse(line: str) -> ParsedCommand:
    """Split on whitespace; the first token picks the built-in, if any.

    `ls` with arguments is not the built-in listing: it goes to the host shell.
    """
    tokens = line.split()
    if not tokens:
        return EmptyLine()
    name, args = tokens[0], tuple(tokens[1:])
    kind = _BUILTINS.get(name)
    if kind is None or (kind is Builtin.LS and args):
        return ExternalCall(line.strip())
    parts = line.strip().split(maxsplit=1)
    rest = parts[1] if len(parts) > 1 else ""
    return BuiltinCall(kind, args, rest)
