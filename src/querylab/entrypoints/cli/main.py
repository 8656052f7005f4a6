"""querylab CLI entry point.

Defines the top-level ``querylab`` command (via Click-Extra) and registers
its subcommands:

- ``querylab db``: forward-only schema management (upgrade/current/heads/status).
- ``querylab seed``: insert the sample teams and members.
- ``querylab members``: list members through the dynamic search predicates.

Examples
    $ querylab --version
    $ querylab db upgrade --force
    $ querylab --sql members --age 10
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from querylab import __version__
from querylab.logging import (
    config_console_handler,
    config_flight_recorder,
    enable_sql_logging,
    log_startup,
)

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .members import members as members_command
from .members import seed as seed_command

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """querylab command-line interface.

    Runs the sample Member/Team queries against the database named by
    QUERYLAB_DB_URL. Use --sql to see the statements SQLAlchemy emits.
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
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--sql/--no-sql",
    "sql_echo",
    is_flag=True,
    help="Print every SQL statement (and its parameters) sent to the database.",
    default=False,
    show_envvar=True,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=Path(user_log_dir("querylab", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="QUERYLAB_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING/ERROR occurs."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help=(
        "Also write the flight recorder buffer to --log-path on a clean exit, "
        "not only when a WARNING/ERROR occurs."
    ),
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
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L alembic=INFO) or via QUERYLAB_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def querylab(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    sql_echo: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """querylab command-line interface."""

    # 0) effective verbosity; SQL echo needs INFO on the console
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))
    if sql_echo:
        level = min(level, logging.INFO)

    # 1) console + optional flight recorder
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(path=log_path, flush_on_close=force_flush)
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 2) per-logger levels, then SQL echo on top
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    if sql_echo:
        enable_sql_logging()

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        force_flush=force_flush,
        sql_echo=sql_echo,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


querylab.add_command(db_group)
querylab.add_command(seed_command)
querylab.add_command(members_command)
