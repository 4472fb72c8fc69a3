"""ls - List a directory, marking directories, executables and everything else."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.markup import escape


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    EXECUTABLE = "executable"
    FILE = "file"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    name: str
    kind: EntryKind


def _kind(entry: os.DirEntry) -> EntryKind:
    # symlinks are not followed: they show up as OTHER
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if not entry.is_file(follow_symlinks=False):
        return EntryKind.OTHER
    if sys.platform != "win32":
        try:
            mode = entry.stat(follow_symlinks=False).st_mode
        except OSError:
            return EntryKind.FILE
        if mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
            return EntryKind.EXECUTABLE
    return EntryKind.FILE


def scan_directory(path: Path) -> list[Entry]:
    """Entries of *path* sorted by name. Raises OSError if it can't be read."""
    with os.scandir(path) as it:
        entries = [Entry(e.name, _kind(e)) for e in it]
    return sorted(entries, key=lambda e: e.name)


def format_entry(entry: Entry) -> str:
    name = escape(entry.name)
    if entry.kind is EntryKind.DIRECTORY:
        return f"[bold blue]{name}/[/bold blue]"
    if entry.kind is EntryKind.EXECUTABLE:
        return f"[bold green]{name}[/bold green]"
    if entry.kind is EntryKind.OTHER:
        return f"{name}*"
    return name


def list_directory(path: Path | None = None) -> str:
    """Rich-markup listing of *path* (default: cwd), one entry per line."""
    try:
        entries = scan_directory(path or Path.cwd())
    except OSError as e:
        return escape(f"Error reading directory: {e}")
    return "\n".join(format_entry(e) for e in entries)
