"""shellinfo - Host OS, memory and CPU summary."""

from __future__ import annotations

import os
import platform
import socket
from dataclasses import dataclass

import psutil

from .. import __version__


@dataclass
class SystemInfo:
    os_name: str
    os_version: str
    hostname: str
    total_memory: int
    used_memory: int
    cpus: int

    @classmethod
    def collect(cls) -> SystemInfo:
        mem = psutil.virtual_memory()
        return cls(
            os_name=platform.system(),
            os_version=platform.release(),
            hostname=socket.gethostname(),
            total_memory=mem.total,
            used_memory=mem.total - mem.available,
            cpus=psutil.cpu_count() or os.cpu_count() or 0,
        )


def shell_info(info: SystemInfo | None = None) -> str:
    info = info or SystemInfo.collect()
    mb = 1024 * 1024
    lines = [
        "[bold]pocketsh info:[/bold]",
        f"  pocketsh version: {__version__}",
        f"  Python version: {platform.python_version()}",
        f"  OS: {info.os_name} {info.os_version}".rstrip(),
        f"  Hostname: {info.hostname}",
        f"  Total memory: {info.total_memory // mb} MB",
        f"  Used memory: {info.used_memory // mb} MB",
        f"  CPUs: {info.cpus}",
    ]
    return "\n".join(lines)
