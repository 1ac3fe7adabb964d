"""Resolution context consumed by the path engine.

The engine never reads process state. Whatever it needs to know about the
caller's environment, the current directory and the platform policy, arrives
in a `ResolutionContext` on every call.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field

from .policy import POSIX, PlatformPolicy

CurrentDirectoryProvider = Callable[[], str]


def process_working_directory() -> str:
    """Return the working directory of the running process."""
    return os.getcwd()


def fixed_directory(path: str) -> CurrentDirectoryProvider:
    """Return a provider that always answers *path*.

    Handy in tests and for tools that resolve against a project root.
    """

    def provider() -> str:
        return path

    return provider


@dataclass(frozen=True)
class ResolutionContext:
    """Inputs the engine needs beyond the paths themselves.

    Attributes:
        current_directory: Directory relative paths are resolved against.
        policy: Separator and absolute-path rules to apply.
    """

    current_directory: str
    policy: PlatformPolicy = field(default=POSIX)

    @classmethod
    def from_provider(
        cls,
        provider: CurrentDirectoryProvider = process_working_directory,
        policy: PlatformPolicy = POSIX,
    ) -> ResolutionContext:
        """Build a context by asking *provider* for the current directory."""
        return cls(current_directory=provider(), policy=policy)

    def with_directory(self, current_directory: str) -> ResolutionContext:
        """Return a copy of this context pointing at another directory."""
        return ResolutionContext(current_directory=current_directory, policy=self.policy)
