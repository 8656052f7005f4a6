"""querylab DB CLI: forward-only Alembic wrappers.

Behavior
- Uses programmatic Alembic configuration; human-oriented notices go to
  **stderr**, Alembic output to **stdout**.
- ``upgrade`` prompts for confirmation unless ``--force`` or ``--sql`` is given.

Requirements
- ``QUERYLAB_DB_URL`` must be set for every command except ``heads``.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from querylab import config
from querylab.adapters.db.engine import make_engine

from .helpers import resolve_db_url, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'querylab db upgrade' to update the schema."


class MigrationStatus(Enum):
    """Describes the migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    return ScriptDirectory.from_config(cfg).get_current_head()


def migration_status(url: str) -> tuple[str | None, MigrationStatus]:
    """Return the current revision of ``url`` and how it compares to head."""
    engine = make_engine(url)
    try:
        rev = _get_current_revision(engine)
    finally:
        engine.dispose()
    head = _get_head_revision(config.build_alembic_config(db_url=url))
    if rev is None:
        return rev, MigrationStatus.UNINITIALIZED
    if rev == head:
        return rev, MigrationStatus.UP_TO_DATE
    return rev, MigrationStatus.OUT_OF_DATE


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@click.option(
    "--verbose", "-v", "verbose", is_flag=True, help="Show alembic's more verbose output."
)
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=resolve_db_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@click.option(
    "--verbose", "-v", "verbose", is_flag=True, help="Show alembic's more verbose output."
)
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = resolve_db_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    logger.info("upgrading %s to head", sanitize_url(url))
    command.upgrade(cfg, revision="head", sql=sql)
    if not sql:
        success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    url = resolve_db_url()
    success("Database reachable")
    engine = make_engine(url)
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")
    engine.dispose()

    rev, state = migration_status(url)
    click.echo(f"Schema  : {f'{rev} ({state.value})' if rev else state.value}")
    if state is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
