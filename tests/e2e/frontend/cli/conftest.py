"""Fixtures for end-to-end tests of the `underbar` command.

`log-demo` is a test-only subcommand that logs one message per level on an
UNDERBAR logger and a few on a third-party logger, so tests can check console
filtering and what the flight recorder writes.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from underbar.entrypoints.cli.main import underbar

# pylint: disable=redefined-outer-name

DEMO_COMMAND = "log-demo"


@click.command()
def log_demo():
    """Log sample messages on 'underbar.demo' and 'some.thirdparty'."""
    demo = logging.getLogger("underbar.demo")
    third_party = logging.getLogger("some.thirdparty")
    for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
        name = logging.getLevelName(level).lower()
        demo.log(level, "This is a %s-level test message.", name)
    for level in (logging.DEBUG, logging.INFO, logging.WARNING):
        name = logging.getLevelName(level).lower()
        third_party.log(level, "This is a %s-level third-party test message.", name)
    demo.debug("This is a final debug-level test message.")


def _unregister(group: click.Group, name: str) -> None:
    """Drop *name* from the group and from any Click-Extra help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Make `underbar log-demo` available for one test."""
    underbar.add_command(log_demo, name=DEMO_COMMAND)
    try:
        yield
    finally:
        _unregister(underbar, DEMO_COMMAND)


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a fresh temporary working directory."""
    with runner.isolated_filesystem():
        yield
