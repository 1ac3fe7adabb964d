"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages on a
project logger and a third-party logger, plus fixtures to register that
command, obtain a CliRunner, and run tests within an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from assegai_util.entrypoints.cli.main import assegai_util

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'assegai_util.demo' and 'some.thirdparty'."""
    logger = logging.getLogger("assegai_util.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any sections click-extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the top-level group for the duration of a test."""
    assegai_util.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(assegai_util, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side effects (log files) to a temporary directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Invoke the CLI without the flight recorder and with a fixed cwd.

    Returns a callable taking the argument list; extra keyword arguments go
    to `CliRunner.invoke`.
    """

    def _invoke(args, **kwargs):
        base = ["--no-flight-recorder", "--cwd", "/home/user"]
        return runner.invoke(assegai_util, base + list(args), **kwargs)

    return _invoke
