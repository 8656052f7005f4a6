"""Logging helpers used by the querylab CLI and library.

Console output goes through Rich. Because the point of querylab is to see
what the query builder sends to the database, SQL emitted by SQLAlchemy's
engine logger can be switched on independently of the console verbosity
and is rendered with a short ``[sql]`` prefix. An in-memory "flight
recorder" keeps recent records and writes them to disk when something goes
wrong.
"""

from __future__ import annotations

import logging
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "querylab"
SQL_LOGGER = "sqlalchemy.engine"
SQL_PREFIX = "[sql]"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate records with a short prefix naming where they came from.

    SQL statements from ``sqlalchemy.engine`` get ``[sql]``; other
    third-party records get their top-level package, e.g. ``[alembic]``;
    querylab records get no prefix. The record is always let through.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(SQL_LOGGER):
            record.prefix = SQL_PREFIX
        elif not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    In debug mode the handler drops to DEBUG and shows source paths and
    logger names; otherwise records carry a short source prefix.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = "%(name)s: %(message)s" if debug_mode else "%(prefix)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def enable_sql_logging() -> Logger:
    """Log every SQL statement the engine executes, with its parameters.

    Equivalent to ``create_engine(..., echo=True)`` but works for engines
    that already exist and leaves handler configuration to the root logger.

    Returns:
        The ``sqlalchemy.engine`` logger.
    """
    sql_logger = logging.getLogger(SQL_LOGGER)
    sql_logger.setLevel(logging.INFO)
    return sql_logger


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Buffers up to ``capacity`` records and writes them to ``path`` when a
    record at ``flush_level`` or higher arrives (or on close if
    ``flush_on_close`` is True).
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    force_flush: bool,
    sql_echo: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary at INFO and environment diagnostics at DEBUG."""
    logger.info(
        "querylab %s: console=%s, sql=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if sql_echo else "OFF",
        "ON" if flight_recorder else "OFF",
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Alembic: %s", alembic.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
