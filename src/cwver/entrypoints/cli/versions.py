"""CWVER version commands: ``today``, ``convert`` and ``bisect``.

Results go to **stdout**; errors are reported on **stderr** through
:func:`helpers.error` and end the command with exit code 1.

Failure modes
- Malformed version string, weekday out of range, or a week that does not
  exist in the given year → exit code 1.
- Invalid ``--workdays`` list or ``from`` after ``till`` → exit code 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from cwver import config
from cwver.domain.errors import DomainError
from cwver.service_layer import queries

from .helpers import arrow_glyph, bullet_glyph, error

if TYPE_CHECKING:
    from cwver.bootstrap import AppContainer
    from cwver.service_layer.results import BisectReport, Conversion


def _ask(app: AppContainer, query: queries.Query) -> Any:
    try:
        return app.message_bus.handle(query)
    except DomainError as e:
        error(str(e))
        raise click.exceptions.Exit(1) from e


def _bullet(conversion: Conversion) -> str:
    return f" {bullet_glyph()} {conversion.version} = {conversion.day}"


def _echo_report(report: BisectReport) -> None:
    click.echo("Regression Range:")
    click.echo(
        f" {report.from_date!s:10}  {arrow_glyph()}  {report.till_date!s:10} "
        f"({report.workdays} workday(s))\n"
    )

    match report.midpoints:
        case ():
            click.echo("Dates too close to each other, no bisecting necessary")
        case (middle,):
            click.echo("Bisect starting point:")
            click.echo(_bullet(middle))
        case (middle_left, middle_right):
            click.echo("Two equivalent bisect starting points:")
            click.echo(_bullet(middle_left) + ", or")
            click.echo(_bullet(middle_right))
        case _:
            raise RuntimeError("More than 2 dates for bisecting found")


@click.command()
@click.pass_obj
def today(app: AppContainer) -> None:
    """Display today's date as cw version string."""
    conversion: Conversion = _ask(app, queries.ShowToday())
    click.echo(f"Today = {conversion.version}")


@click.command()
@click.argument("cw_ver_str")
@click.pass_obj
def convert(app: AppContainer, cw_ver_str: str) -> None:
    """Convert cw version string (e.g. 21w45.7) into ISO date."""
    conversion: Conversion = _ask(app, queries.ConvertVersion(cw_ver_str))
    click.echo(f"{conversion.version} = {conversion.day}")


@click.command()
@click.argument("from_version", metavar="FROM")
@click.argument("till_version", metavar="TILL")
@click.option(
    "--workdays",
    "-w",
    default=config.get_default_workdays,
    show_default=config.DEFAULT_WORKDAYS,
    help=(
        "Comma separated ISO weekdays (1=Monday ... 7=Sunday) that count as "
        f"workdays. Defaults to ${config.WORKDAYS_ENV_VAR} when set."
    ),
)
@click.pass_obj
def bisect(
    app: AppContainer, from_version: str, till_version: str, workdays: str
) -> None:
    """Calculate the workday(s) in the middle of two given cw versions.

    FROM and TILL span the regression range. Saturdays and Sundays are
    ignored; use --workdays to override.
    """
    report: BisectReport = _ask(
        app, queries.BisectRange(from_version, till_version, workdays=workdays)
    )
    _echo_report(report)
