"""Logging setup for the UNDERBAR CLI and for applications embedding UNDERBAR.

The library itself only logs through ``logging.getLogger(__name__)`` and never
installs handlers. Everything here is opt-in plumbing:

- a Rich console handler writing to stderr (stdout carries command results),
- a "flight recorder": a `MemoryHandler` that keeps recent records at DEBUG
  granularity and dumps them to a file once something goes wrong,
- a startup banner describing the active configuration.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "underbar"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside UNDERBAR with their top-level package.

    Sets ``record.prefix`` to e.g. ``"[asyncio]"`` for an ``asyncio.events``
    record and to ``""`` for UNDERBAR's own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.split(".", 1)[0]
        record.prefix = "" if top_level == PROJECT_PREFIX else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown on the console. Ignored in debug mode,
            which always shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations.
        color: Let Rich pick a color system; plain text when False.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


@dataclass(frozen=True, slots=True)
class FlightRecorder:
    """Settings of the flight recorder.

    Attributes:
        path: File the buffer is dumped to. Truncated when the handler is built.
        capacity: Number of records kept in memory.
        flush_level: Records at or above this level trigger a dump.
        flush_on_close: Also dump whatever is buffered at shutdown.
    """

    path: Path
    capacity: int = 2000
    flush_level: int = logging.WARNING
    flush_on_close: bool = False

    def describe(self) -> str:
        return (
            f"path={self.path}, capacity={self.capacity}, "
            f"flush_on_close={self.flush_on_close}"
        )


def config_flight_recorder(recorder: FlightRecorder) -> MemoryHandler:
    """Build the memory handler described by *recorder*."""
    target = logging.FileHandler(recorder.path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=recorder.capacity,
        flushLevel=recorder.flush_level,
        target=target,
        flushOnClose=recorder.flush_on_close,
    )


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    recorder: FlightRecorder | None,
    logger_levels: dict[str, int],
) -> None:
    """Log the startup banner at INFO, then environment details at DEBUG.

    Args:
        logger: Where to log.
        app_version: Version shown in the banner.
        level: Console level in effect.
        handlers: Handlers installed on the root logger.
        recorder: Flight recorder settings, or None when it is disabled.
        logger_levels: Per-logger level overrides in effect.
    """
    logger.info(
        "UNDERBAR %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "OFF" if recorder is None else "ON",
    )

    details = [
        ("Python", sys.version.split()[0]),
        ("Platform", f"{platform.system()} {platform.release()}"),
        ("PID", os.getpid()),
        ("CWD", Path.cwd()),
        ("Click", _package_version("click")),
        ("Rich", _package_version("rich")),
        ("Handlers", [type(h).__name__ for h in handlers]),
    ]
    if recorder is not None:
        details.append(("Flight recorder", recorder.describe()))
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    details.append(("Per-logger overrides", overrides or "<none>"))

    for label, value in details:
        logger.debug("%s: %s", label, value)


def _package_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<unknown>"
