"""testing-example CLI entry point.

Defines the top-level ``testing-example`` command (via Click-Extra), sets up
console logging and the flight recorder, and registers subcommands.

Currently available commands
- ``testing-example demo`` runs the article scenario against an in-memory site.

Examples
    $ testing-example --version
    $ testing-example -v demo --title "Hello"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from testing_example import __version__
from testing_example.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .demo import demo
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """testing-example command-line interface.

    testing-example pairs a tiny value-holding Unit class with an in-memory
    content site: content types, taxonomy, users and roles, managed files and
    a simulated browser. The demo command authors an article and checks that
    the right visitors can see it.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink("https://www.drupal.org/docs/develop/automated-testing"),
        "  Issues: " + hyperlink("https://www.drupal.org/project/issues/examples"),
    ]
)


def console_level(verbose_count: int, quiet_count: int) -> int:
    """Return the console level for the -v/-q counts.

    Each flag moves one level away from WARNING; the result stays within
    DEBUG and CRITICAL.
    """
    level = logging.WARNING - 10 * (verbose_count - quiet_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("testing-example", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="TESTING_EXAMPLE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="TESTING_EXAMPLE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "with --force-flush. Console verbosity is unchanged."
    ),
    default=True,
    envvar="TESTING_EXAMPLE_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit, even without warnings.",
    default=False,
    envvar="TESTING_EXAMPLE_FORCE_FLUSH_FLIGHT_RECORDER",
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
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight recorder. Repeatable (e.g. -L testing_example.adapters=INFO) or via "
        "TESTING_EXAMPLE_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="TESTING_EXAMPLE_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def testing_example(  # pylint: disable=too-many-arguments, too-many-positional-arguments
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
    """testing-example command-line interface."""

    level = console_level(verbose_count, quiet_count)

    # console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


testing_example.add_command(demo)
