"""Commands: line parsing and built-in dispatch."""

from .handler import QUIT, CommandRouter, help_text
from .parser import (
    COMMANDS,
    USAGE,
    Builtin,
    BuiltinCall,
    EmptyLine,
    ExternalCall,
    builtin_names,
    parse,
)

__all__ = [
    "COMMANDS",
    "QUIT",
    "USAGE",
    "Builtin",
    "BuiltinCall",
    "CommandRouter",
    "EmptyLine",
    "ExternalCall",
    "builtin_names",
    "help_text",
    "parse",
]
