"""SQLAlchemy-backed Unit of Work for querylab.

Provides a context-managed UnitOfWork around a SQLAlchemy `Session`. The
session's identity map plays the part of the persistence context: entities
passed to `persist` are tracked, written on `flush`, and forgotten on
`clear`.

Bulk ``update``/``delete`` statements run through `session` go straight to
the database. Entities already tracked keep their old state until the
unit of work is flushed and cleared.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from querylab.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory
        self.session: Session

    def __enter__(self):
        self.session = self.session_factory()
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.session.close()

    def persist(self, entity: Any) -> None:
        self.session.add(entity)

    def flush(self) -> None:
        self.session.flush()

    def clear(self) -> None:
        logger.debug("clearing %d tracked entities", len(self.session.identity_map))
        self.session.expunge_all()

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
