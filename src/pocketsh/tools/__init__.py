"""Tools: external command execution, directory listing, system info."""

from .external import ExecResult, run_external
from .listing import list_directory
from .sysinfo import shell_info

__all__ = ["ExecResult", "list_directory", "run_external", "shell_info"]
