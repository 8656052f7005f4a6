"""Unit of Work interface for querylab.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
that tracks entities and exposes abstract commit/rollback methods.
"""

from __future__ import annotations

import abc
from typing import Any


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @abc.abstractmethod
    def persist(self, entity: Any) -> None:
        """Start tracking ``entity``; it is inserted on the next flush."""

    @abc.abstractmethod
    def flush(self) -> None:
        """Write pending changes to the database without committing."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Forget every tracked entity so later reads come from the database."""

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
