"""Prompt-toolkit completer for built-in command names and aliases."""

from __future__ import annotations

from prompt_toolkit.completion import Completer, Completion

from ..commands import builtin_names


class _CommandCompleter(Completer):
    """Complete the first word of the line from built-ins, then aliases."""

    def __init__(self, aliases=None):
        self._aliases = aliases

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()
        if not text or " " in text:
            return
        for name in builtin_names():
            if name.startswith(text):
                yield Completion(name, start_position=-len(text), display_meta="built-in")
        if self._aliases is not None:
            for name, value in self._aliases.items():
                if name.startswith(text):
                    yield Completion(name, start_position=-len(text), display_meta=value)
