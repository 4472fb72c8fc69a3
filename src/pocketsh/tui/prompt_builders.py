"""Prompt-toolkit prompt, style and terminal title."""

from __future__ import annotations

from pathlib import Path

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.shortcuts import set_title
from prompt_toolkit.styles import Style

from ..core.utils import short_cwd

PROMPT_STYLE = Style.from_dict(
    {
        "prompt.symbol": "bold ansired",
        "prompt.name": "bold ansigreen",
        "prompt.branch": "bold ansimagenta",
    }
)


def _build_prompt(symbol: str, cwd: Path, branch: str | None = None) -> FormattedText:
    fragments = [
        ("class:prompt.symbol", symbol),
        ("", " "),
        ("class:prompt.name", f"pocketsh [{short_cwd(cwd)}]"),
    ]
    if branch:
        fragments.append(("class:prompt.branch", f"[{branch}]"))
    fragments.append(("", "> "))
    return FormattedText(fragments)


def set_window_title(title: str = "pocketsh") -> None:
    set_title(title)
