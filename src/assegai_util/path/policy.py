"""Platform policies for the path engine.

A policy bundles the separator characters and the absolute-path test of one
platform. Exactly two policies exist, `POSIX` and `WINDOWS`; callers select
one explicitly so both branches behave the same on every host.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformPolicy:
    """Separator characters and root rules for one platform.

    Attributes:
        name: Short lowercase identifier (``"posix"`` or ``"windows"``).
        separator: Character placed between path segments.
        list_separator: Character placed between entries of a search path
            (``PATH``-style lists).
        separator_pattern: Matches a run of separators inside a joined path.
        absolute_pattern: Matches the start of a raw path that is absolute.
        root_pattern: Matches the root prefix of a separator-unified path.
        case_sensitive: Whether two paths differing only in case are
            different paths.
    """

    name: str
    separator: str
    list_separator: str
    separator_pattern: re.Pattern[str]
    absolute_pattern: re.Pattern[str]
    root_pattern: re.Pattern[str]
    case_sensitive: bool = True

    def is_absolute(self, path: str) -> bool:
        """Return True if *path* starts at a root of this platform."""
        return self.absolute_pattern.match(path) is not None

    def split_root(self, path: str) -> tuple[str, str]:
        """Split a separator-unified *path* into ``(root, rest)``.

        ``root`` is empty for relative paths.
        """
        if (match := self.root_pattern.match(path)) is None:
            return "", path
        return match.group(0), path[match.end() :]

    def is_root(self, path: str) -> bool:
        """Return True if *path* is nothing but a root prefix."""
        root, rest = self.split_root(path)
        return bool(root) and not rest

    def comparable(self, text: str) -> str:
        """Return *text* in the form used to compare paths of this platform."""
        return text if self.case_sensitive else text.casefold()


POSIX = PlatformPolicy(
    name="posix",
    separator="/",
    list_separator=":",
    separator_pattern=re.compile(r"/+"),
    absolute_pattern=re.compile(r"/"),
    root_pattern=re.compile(r"/"),
)

WINDOWS = PlatformPolicy(
    name="windows",
    separator="\\",
    list_separator=";",
    separator_pattern=re.compile(r"[\\/]+"),
    absolute_pattern=re.compile(r"[\\/]|[A-Za-z]:[\\/]"),
    root_pattern=re.compile(r"(?:[A-Za-z]:)?\\"),
    case_sensitive=False,
)

POLICIES: dict[str, PlatformPolicy] = {p.name: p for p in (POSIX, WINDOWS)}


def select_policy(name: str) -> PlatformPolicy:
    """Return the policy registered under *name* (case-insensitive).

    Raises:
        KeyError: If no policy has that name.
    """
    try:
        return POLICIES[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown platform policy {name!r}") from None
