"""Commands that read and write the sample members.

- ``querylab seed`` inserts the sample teams and members.
- ``querylab members`` lists members, optionally filtered by username
  and/or age. Both filters are optional; leaving both out lists everyone.

Both need an up-to-date schema (``querylab db upgrade``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from querylab.adapters.db.engine import make_engine, make_session_factory
from querylab.adapters.orm import start_mappers
from querylab.adapters.unit_of_work import SqlAlchemyUnitOfWork
from querylab.queries.predicates import search_member_builder, search_member_where
from querylab.sample_data import seed as seed_sample_data

from .db import UPGRADE_SCHEMA_INSTRUCTIONS, MigrationStatus, migration_status
from .helpers import error, resolve_db_url, success

logger = logging.getLogger(__name__)

SEARCH_STYLES = {
    "where": search_member_where,
    "builder": search_member_builder,
}


@contextmanager
def _unit_of_work() -> Iterator[SqlAlchemyUnitOfWork]:
    """Open a unit of work on a migrated database; the engine is disposed on exit."""
    url = resolve_db_url()
    _, state = migration_status(url)
    if state is not MigrationStatus.UP_TO_DATE:
        error(f"Database schema is {state.value}.")
        raise click.ClickException(UPGRADE_SCHEMA_INSTRUCTIONS)
    start_mappers()
    engine = make_engine(url)
    try:
        with SqlAlchemyUnitOfWork(make_session_factory(engine)) as uow:
            yield uow
    finally:
        engine.dispose()


@click.command()
def seed() -> None:
    """Insert the sample teams and members."""
    with _unit_of_work() as uow:
        data = seed_sample_data(uow.session)
        uow.commit()
    success(f"Seeded {len(data.teams)} teams and {len(data.members)} members.")


@click.command()
@click.option("--username", "-u", default=None, help="Exact username to match.")
@click.option("--age", "-a", type=int, default=None, help="Exact age to match.")
@click.option(
    "--style",
    type=click.Choice(sorted(SEARCH_STYLES), case_sensitive=False),
    default="where",
    show_default=True,
    help="How the optional filters are combined into the query.",
)
def members(username: str | None, age: int | None, style: str) -> None:
    """List members as tab-separated USERNAME, AGE, TEAM lines."""
    search = SEARCH_STYLES[style.lower()]
    with _unit_of_work() as uow:
        found = search(uow.session, username, age)
        logger.info("%d member(s) matched", len(found))
        for member in found:
            team_name = member.team.name if member.team is not None else ""
            click.echo(f"{member.username or ''}\t{member.age}\t{team_name}")
