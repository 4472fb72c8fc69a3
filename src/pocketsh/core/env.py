"""Environment providers: the process environment, or an in-memory stand-in."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping


class Environment(ABC):
    """Key/value store behind `setenv`/`getenv` and subprocess inheritance."""

    @abstractmethod
    def get(self, name: str) -> str | None: ...

    @abstractmethod
    def set(self, name: str, value: str) -> None: ...

    @abstractmethod
    def snapshot(self) -> dict[str, str] | None:
        """Environment to hand to a child process; None means inherit ours."""


class OsEnvironment(Environment):
    """Reads and writes ``os.environ``."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value

    def snapshot(self) -> dict[str, str] | None:
        return None


class DictEnvironment(Environment):
    """Private copy of an environment, seeded from ``os.environ`` by default."""

    def __init__(self, initial: Mapping[str, str] | None = None):
        self.vars: dict[str, str] = dict(os.environ if initial is None else initial)

    def get(self, name: str) -> str | None:
        return self.vars.get(name)

    def set(self, name: str, value: str) -> None:
        self.vars[name] = value

    def snapshot(self) -> dict[str, str] | None:
        return dict(self.vars)
