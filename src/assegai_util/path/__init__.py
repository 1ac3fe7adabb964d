"""Path engine: pure join/normalize/resolve/relative/parse/format functions.

The working directory and the platform are inputs, supplied through a
`ResolutionContext` (or a bare `PlatformPolicy` where only separators
matter). Nothing in this package reads process state or the filesystem.
"""

from .context import (
    CurrentDirectoryProvider,
    ResolutionContext,
    fixed_directory,
    process_working_directory,
)
from .engine import (
    basename,
    delimiter,
    dirname,
    extension,
    format,
    is_absolute,
    join,
    normalize,
    parse,
    posix,
    relative,
    resolve,
    sep,
    windows,
)
from .parsed import ParsedPath, ParseMode
from .policy import POSIX, WINDOWS, PlatformPolicy, select_policy

# pylint: disable=redefined-builtin

__all__ = [
    "CurrentDirectoryProvider",
    "ParseMode",
    "ParsedPath",
    "PlatformPolicy",
    "POSIX",
    "ResolutionContext",
    "WINDOWS",
    "basename",
    "delimiter",
    "dirname",
    "extension",
    "fixed_directory",
    "format",
    "is_absolute",
    "join",
    "normalize",
    "parse",
    "posix",
    "process_working_directory",
    "relative",
    "resolve",
    "select_policy",
    "sep",
    "windows",
]
