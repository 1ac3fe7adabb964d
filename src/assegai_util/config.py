"""Configuration utilities for assegai-util.

The library itself takes every setting as an argument. This module reads the
environment for entrypoints (the CLI) that need defaults.
"""

import os

from assegai_util.errors import UtilError
from assegai_util.path import (
    POSIX,
    PlatformPolicy,
    ResolutionContext,
    fixed_directory,
    process_working_directory,
    select_policy,
)

PLATFORM_ENV_VAR = "ASSEGAI_UTIL_PLATFORM"  # pragma: no mutate
CWD_ENV_VAR = "ASSEGAI_UTIL_CWD"  # pragma: no mutate


class UnknownPlatformError(UtilError, ValueError):
    """Raised when a platform name does not match any policy."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown platform {name!r}; expected 'posix' or 'windows'.")
        self.name = name


def get_platform_policy(name: str | None = None) -> PlatformPolicy:
    """Return the platform policy to use.

    Args:
        name: Explicit platform name. When None, `ASSEGAI_UTIL_PLATFORM` is
            consulted, and POSIX is used if that is unset or empty.

    Raises:
        UnknownPlatformError: If the name matches no policy.
    """
    if name is None and not (name := os.environ.get(PLATFORM_ENV_VAR)):
        return POSIX
    try:
        return select_policy(name)
    except KeyError as e:
        raise UnknownPlatformError(name) from e


def build_context(
    cwd: str | None = None, platform: str | None = None
) -> ResolutionContext:
    """Build a `ResolutionContext` from arguments or the environment.

    The current directory is, in order of precedence: *cwd*, the value of
    `ASSEGAI_UTIL_CWD`, the process working directory.
    """
    if cwd is None:
        cwd = os.environ.get(CWD_ENV_VAR) or None
    provider = fixed_directory(cwd) if cwd is not None else process_working_directory
    return ResolutionContext.from_provider(provider, get_platform_policy(platform))
