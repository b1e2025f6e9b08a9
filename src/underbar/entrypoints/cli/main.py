"""UNDERBAR CLI entry point.

The top-level ``underbar`` group (built with Click-Extra) owns logging: it
installs the Rich console handler and the flight recorder before any
subcommand runs. Subcommands live in `underbar.entrypoints.cli.commands`.

Logs go to stderr; stdout carries only command results, so output can be
piped into other tools.

Examples
    $ underbar --version
    $ underbar -v sort-by '[{"n": 2}, {"n": 1}]' --key n
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from underbar import __version__
from underbar.logging import (
    FlightRecorder,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .commands import COMMANDS
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("underbar", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """UNDERBAR command-line interface.

    Apply UNDERBAR's collection operations to JSON documents. Each command
    reads its collections as JSON arguments (or '-' for stdin) and prints the
    result as JSON, so commands compose in shell pipelines.
    """


def console_level(verbose_count: int, quiet_count: int) -> int:
    """Shift WARNING by one level per -v (down) or -q (up), within DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


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
    default=0,
    help="Show more on the console: INFO with -v, DEBUG with -vv.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console: ERROR with -q, CRITICAL with -qq.",
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    default=False,
    help="Log everything with timestamps, logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="UNDERBAR_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="UNDERBAR_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    default=True,
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory, whatever the console level, and "
        "write them to --log-path when a WARNING or worse is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("underbar.scheduling=INFO",),
    show_default=True,
    show_envvar=True,
    help=(
        "Set the level of one logger as NAME=LEVEL, for both the console and "
        "the flight recorder. Repeatable; UNDERBAR_LOGGER_LEVEL takes a "
        "comma or space separated list."
    ),
)
@clickx.pass_context
def underbar(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """UNDERBAR command-line interface."""
    level = console_level(verbose_count, quiet_count)

    # ctx.color is None unless --color/--no-color was given
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=ctx.color is not False)
    ]

    recorder = None
    if flight_recorder:
        recorder = FlightRecorder(
            path=log_path,
            capacity=flight_recorder_capacity,
            flush_on_close=force_flush_flight_recorder,
        )
        handlers.append(config_flight_recorder(recorder))

    # the root logger passes everything; each handler applies its own level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        recorder=recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


for command in COMMANDS:
    underbar.add_command(command)
