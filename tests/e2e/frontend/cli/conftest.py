"""Fixtures for end-to-end tests of the global `cwver` options.

`log-demo` is a throwaway subcommand that logs one line per level on a
project logger (``cwver.demo``) and a few lines on a foreign one
(``some.thirdparty``), so verbosity, logger levels and the flight recorder
can be observed without depending on what the real commands happen to log.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from cwver.entrypoints.cli.main import cwver

# pylint: disable=redefined-outer-name

DEMO_LOGGER = "cwver.demo"
THIRD_PARTY_LOGGER = "some.thirdparty"


@click.command()
def log_demo():
    """Log a line per level, then a last DEBUG line after the errors."""
    demo = logging.getLogger(DEMO_LOGGER)
    for level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    ):
        demo.log(level, "demo %s", logging.getLevelName(level).lower())

    third_party = logging.getLogger(THIRD_PARTY_LOGGER)
    for level in (logging.DEBUG, logging.INFO, logging.WARNING):
        third_party.log(level, "foreign %s", logging.getLevelName(level).lower())

    demo.debug("demo trailing debug")


@pytest.fixture
def registered_log_demo():
    """Make `cwver log-demo` available for one test."""
    cwver.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        # click-extra keeps its own per-section registries
        cwver.commands.pop("log-demo", None)
        if hasattr(cwver, "_default_section"):
            cwver._default_section.commands.pop("log-demo", None)  # pylint: disable=protected-access
        for section in getattr(cwver, "_sections", []):
            getattr(section, "commands", {}).pop("log-demo", None)


@pytest.fixture
def runner():
    """A plain CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a fresh temporary working directory."""
    with runner.isolated_filesystem():
        yield
