"""assegai-util CLI entry point.

Defines the top-level ``assegai-util`` command (via Click-Extra) and registers
the subcommands.

Currently available groups
- ``assegai-util path``: join/normalize/resolve/relative/parse/format paths.
- ``assegai-util text``: case conversion and pluralization.
- ``assegai-util empty-dir``: delete the contents of a directory.

Notes
- ``--platform`` and ``--cwd`` build the resolution context every path command
  uses; both fall back to ``ASSEGAI_UTIL_PLATFORM`` / ``ASSEGAI_UTIL_CWD`` and
  then to POSIX and the process working directory.

Examples
    $ assegai-util path normalize foo/can/../bar
    $ assegai-util --cwd /srv/www path resolve static ../img/logo.png
    $ assegai-util --platform windows path join C: Users me
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from assegai_util import __version__, config
from assegai_util.errors import UtilError
from assegai_util.fs import empty_directory
from assegai_util.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers import error, parse_log_level, success
from .path_cmds import path as path_group
from .text_cmds import text as text_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """assegai-util command-line interface.

    Array, string and path helpers for scripting. Path commands are pure string
    transformations: nothing is read from or written to the filesystem, and the
    working directory and platform rules come from --cwd and --platform.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (logger names, timestamps and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight-recorder log file.",
    default=Path(user_log_dir("assegai-util", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="ASSEGAI_UTIL_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last log records at DEBUG granularity in memory and write "
        "them to --log-path when a WARNING/ERROR occurs, or on exit with "
        "--force-flush. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight-recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Repeatable "
        "(e.g. -L inflect=INFO) or via ASSEGAI_UTIL_LOGGER_LEVELS."
    ),
    default=("inflect=WARNING",),
    envvar="ASSEGAI_UTIL_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--platform",
    type=click.Choice(["posix", "windows"], case_sensitive=False),
    envvar=config.PLATFORM_ENV_VAR,
    default=None,
    show_envvar=True,
    help="Separator and absolute-path rules for path commands [default: posix].",
)
@click.option(
    "--cwd",
    envvar=config.CWD_ENV_VAR,
    default=None,
    show_envvar=True,
    help="Directory relative paths resolve against [default: process cwd].",
)
@clickx.pass_context
def assegai_util(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    platform: str | None,
    cwd: str | None,
) -> None:
    """assegai-util command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path, flush_on_close=force_flush_flight_recorder
            )
        )

    # 3) root logger
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) resolution context for the path commands
    try:
        ctx.obj = config.build_context(cwd=cwd, platform=platform)
    except UtilError as e:
        raise click.ClickException(str(e)) from e

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
        context=ctx.obj,
    )

    ctx.call_on_close(logging.shutdown)


@assegai_util.command("empty-dir")
@click.argument("directory", type=click.Path(path_type=Path))
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
def empty_dir(directory: Path, yes: bool) -> None:
    """Delete everything inside DIRECTORY, keeping DIRECTORY itself."""
    if not directory.is_dir():
        error(f"Not a directory: {directory}")
        raise click.exceptions.Exit(1)
    if not yes:
        click.confirm(f"Delete all contents of {directory}?", abort=True, err=True)
    empty_directory(directory)
    success(f"Emptied {directory}")


assegai_util.add_command(path_group)
assegai_util.add_command(text_group)
