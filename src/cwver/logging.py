"""Logging setup for the CWVER command line.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose level follows ``-v``/``-q``
- an optional *flight recorder*, a ``MemoryHandler`` that keeps the latest
  records at DEBUG granularity and dumps them into a log file as soon as a
  WARNING (or worse) is logged, or on exit when forced to

Per-logger levels (``-L NAME=LEVEL``) are set on the loggers themselves and
therefore apply to both handlers.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Mapping

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "cwver"
DEFAULT_CONSOLE_LEVEL = logging.WARNING
DEFAULT_FLIGHT_CAPACITY = 2000

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def console_level(verbose_count: int = 0, quiet_count: int = 0) -> int:
    """Map ``-v``/``-q`` repetitions onto a level, starting from WARNING.

    Each ``-v`` lowers and each ``-q`` raises the level by one step; the
    result is clamped to DEBUG..CRITICAL.
    """
    level = DEFAULT_CONSOLE_LEVEL - 10 * verbose_count + 10 * quiet_count
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True)
class LoggingOptions:
    """Everything the CLI knows about how logging should be set up.

    Attributes:
        level: Console level, see `console_level`.
        debug: Developer mode; console shows DEBUG with source locations.
        color: Allow colored console output.
        log_path: Destination of the flight recorder dump.
        flight_recorder: Whether to keep the in-memory flight recorder.
        flight_capacity: Number of records the flight recorder keeps.
        force_flush: Dump the flight recorder on exit even without warnings.
        logger_levels: Minimum levels of individual loggers.
    """

    level: int = DEFAULT_CONSOLE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = True
    flight_capacity: int = DEFAULT_FLIGHT_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def records_flight(self) -> bool:
        """True if a flight recorder is set up (it needs a path)."""
        return self.flight_recorder and self.log_path is not None


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records of other libraries with their top-level package.

    Sets ``record.prefix`` to e.g. ``"[urllib3]"`` for a record of
    ``urllib3.connectionpool`` and to ``""`` for CWVER's own loggers. Never
    drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown (forced to DEBUG in `debug_mode`).
        debug_mode: Show timestamps, logger names and source locations.
        color: Follow click-extra's ``--color``/``--no-color``.

    Returns:
        RichHandler: Handler for the root logger.
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
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to `path`.

    Records are buffered until one at `flush_level` arrives or the buffer
    holds `capacity` records. The file is truncated on every run and only
    created once something is flushed into it.

    Args:
        path: Destination log file.
        capacity: Number of records kept in memory.
        flush_level: Level that triggers a dump.
        flush_on_close: Also dump on close (``--force-flush``).

    Returns:
        MemoryHandler: Handler for the root logger.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(options: LoggingOptions) -> list[logging.Handler]:
    """Replace the root handlers according to `options`.

    The root logger itself passes everything; the handlers and the
    per-logger levels do the filtering.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=options.level, debug_mode=options.debug, color=options.color
        )
    ]
    if options.flight_recorder and options.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=options.log_path,
                capacity=options.flight_capacity,
                flush_on_close=options.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in options.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: logging.Logger,
    options: LoggingOptions,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line summary at INFO and the environment at DEBUG.

    The DEBUG lines end up in the flight recorder, so every dump starts with
    the interpreter, platform, process, Click version and logging setup that
    produced it.
    """
    logger.info(
        "CWVER %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(options.level),
        "ON" if options.records_flight else "OFF",
    )

    logger.debug("Python: %s", platform.python_version())
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Executable: %s", sys.executable)
    logger.debug("Click: %s", version("click"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if options.records_flight:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            options.log_path,
            options.flight_capacity,
            options.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(lvl)
            for name, lvl in options.logger_levels.items()
        }
        or "<none>",
    )
