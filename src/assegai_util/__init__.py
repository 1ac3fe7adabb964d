"""ASSEGAI-UTIL

Array, string and path helpers for general-purpose scripting. The path
engine joins, normalizes, resolves and diffs filesystem-style paths as pure
functions of their inputs.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
