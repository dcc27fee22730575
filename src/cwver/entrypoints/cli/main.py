"""CWVER CLI entry point.

Defines the top-level ``cwver`` group (via Click-Extra): global logging
options, the application container, and the version subcommands.

Subcommands
- ``cwver today``:   today's date as a cw version string (also the default).
- ``cwver convert``: cw version string to ISO date.
- ``cwver bisect``:  bisect starting point(s) of a regression range.

The application container is only built when ``ctx.obj`` is empty, so callers
(tests in particular) may hand in their own, e.g. with a fixed clock.

Examples
    $ cwver
    $ cwver convert 21w45.7
    $ cwver -v bisect 21w10.1 21w11.1 --workdays 1,2,3,4,5
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from cwver import __version__
from cwver.bootstrap import bootstrap
from cwver.logging import (
    DEFAULT_FLIGHT_CAPACITY,
    LoggingOptions,
    configure_logging,
    console_level,
    log_startup,
)

from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .versions import bisect, convert, today

logger = logging.getLogger(__name__)


HELP = """Command line tool to work with calendar week version strings (e.g. 21w45.7).

    A cw version string YYwWW.D names a day by its ISO week-year (two digits),
    ISO week and weekday (1=Monday ... 7=Sunday). Without a subcommand, today's
    date is displayed.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  ISO week date: " + hyperlink("https://en.wikipedia.org/wiki/ISO_week_date"),
    ]
)


def _default_log_path() -> Path:
    return Path(user_log_dir("cwver", appauthor=False, ensure_exists=True)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
    invoke_without_command=True,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Show more log messages on stderr (INFO with -v, DEBUG with -vv).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show fewer log messages on stderr (ERROR with -q, CRITICAL with -qq).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to stderr, with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=_default_log_path,
    envvar="CWVER_LOG_PATH",
    show_default="<user log dir>/latest.log",
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_CAPACITY,
    hidden=True,
    envvar="CWVER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records kept by the flight recorder.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    envvar="CWVER_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent log records in memory at DEBUG granularity, regardless "
        "of -v/-q, and write them to --log-path once a WARNING or ERROR is "
        "logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    envvar="CWVER_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Write the flight recorder to --log-path on exit even if nothing went wrong.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    envvar="CWVER_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level of a single logger as NAME=LEVEL, e.g. "
        "-L cwver.domain=INFO. Applies to stderr and the flight recorder. "
        "Repeatable; CWVER_LOGGER_LEVEL takes a comma or space separated list."
    ),
)
@clickx.pass_context
def cwver(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """CWVER command-line interface."""

    options = LoggingOptions(
        level=console_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(options)
    log_startup(logger, options, handlers, app_version=__version__)
    ctx.call_on_close(logging.shutdown)

    if ctx.obj is None:
        ctx.obj = bootstrap()

    if ctx.invoked_subcommand is None:
        ctx.invoke(today)


cwver.add_command(today)
cwver.add_command(convert)
cwver.add_command(bisect)
