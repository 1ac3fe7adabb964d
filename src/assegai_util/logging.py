"""Logging helpers used by the assegai-util CLI.

This module configures console logging with Rich and an in-memory "flight
recorder" that buffers log records and writes them to disk on flush. A filter
tags third-party records with a short prefix for console formatting.

Library modules only create loggers with ``logging.getLogger(__name__)``;
nothing here runs unless an entrypoint asks for it.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from assegai_util.path import ResolutionContext

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "assegai_util"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get ``record.prefix`` set to a
    bracketed token like "[inflect]"; project records get an empty prefix.
    The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode it logs at DEBUG and shows
    source file/line information; otherwise third-party records get a short
    prefix.

    Args:
        level: Minimum level for console output (DEBUG in debug mode).
        debug_mode: Enable debug formatting (paths, timestamps, logger names).
        color: Enable color output.

    Returns:
        RichHandler: Handler suitable for the root logger.
    """

    # Keep in step with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Up to `capacity` records are buffered and written to `path` when a record
    at `flush_level` or higher arrives (or on close if `flush_on_close`).

    Args:
        path: Destination file for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"  # pylint: disable=line-too-long
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<not installed>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
    context: ResolutionContext,
) -> None:
    """Log a one-line summary and DEBUG diagnostics at CLI startup.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder output file, or None.
        flight_recorder: Whether the flight recorder is enabled.
        logger_levels: Per-logger level overrides.
        context: Resolution context the path commands will use.
    """
    logger.info(
        "assegai-util %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("inflect: %s", _distribution_version("inflect"))
    logger.debug(
        "Path context: policy=%s, cwd=%s",
        context.policy.name,
        context.current_directory,
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug("Flight recorder: path=%s", str(log_path) if log_path else "<none>")
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
