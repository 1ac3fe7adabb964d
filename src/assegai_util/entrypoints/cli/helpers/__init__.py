"""CLI helpers for assegai-util.

Logger-level option parsing and message emitters that write to stderr with
emoji to ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "success", "warn"]
