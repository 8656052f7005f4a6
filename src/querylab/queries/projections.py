"""DTO projections built on SQLAlchemy bundles.

A projection selects a handful of column expressions and turns every result
row into an instance of a target class. Three strategies are supported:

- **bean**: build ``target()`` and assign each column with ``setattr``,
  so property setters run.
- **fields**: build ``target()`` and write each column straight into the
  instance ``__dict__`` (or its slots), bypassing property setters.
- **constructor**: call ``target(*values)`` with the columns in order.

``bean`` and ``fields`` match columns to attributes by label; use
``expr.label("name")`` to rename a column (including scalar subqueries).

Example:
    ```py
    stmt = select(bean(MemberDto, Member.username, Member.age))
    dtos = session.scalars(stmt).all()
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import Enum
from inspect import getattr_static
from typing import Any

from sqlalchemy.orm import Bundle

from querylab.errors import ProjectionError

__all__ = ["ProjectionMode", "DtoBundle", "bean", "fields", "constructor"]

logger = logging.getLogger(__name__)


class ProjectionMode(str, Enum):
    """How a row is turned into the projection target."""

    BEAN = "bean"
    FIELDS = "fields"
    CONSTRUCTOR = "constructor"


class DtoBundle(Bundle):
    """A single-entity bundle that yields one ``target`` instance per row."""

    def __init__(self, target: type, mode: ProjectionMode, *exprs: Any) -> None:
        super().__init__(
            f"{target.__name__.lower()}_{mode.value}", *exprs, single_entity=True
        )
        self.target = target
        self.mode = ProjectionMode(mode)

    def _gen_cache_key(self, anon_map: Any, bindparams: list[Any]) -> tuple[Any, ...]:
        # compiled statements are cached; same-named targets must not share an entry
        return (self.target, self.mode) + super()._gen_cache_key(anon_map, bindparams)

    def create_row_processor(
        self, query: Any, procs: Sequence[Callable[[Any], Any]], labels: Sequence[str]
    ) -> Callable[[Any], Any]:
        build = self._builder(list(labels))

        def proc(row: Any) -> Any:
            return build([p(row) for p in procs])

        return proc

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _builder(self, labels: list[str]) -> Callable[[list[Any]], Any]:
        if self.mode is ProjectionMode.CONSTRUCTOR:
            return self._construct
        self._check_labels(labels)
        if self.mode is ProjectionMode.BEAN:
            return lambda values: self._assign(labels, values)
        return lambda values: self._inject(labels, values)

    def _check_labels(self, labels: list[str]) -> None:
        """Fail once, before any row is processed, if a label has no target attribute."""
        blank = self._empty_instance()
        known = (
            _field_names(blank) if self.mode is ProjectionMode.FIELDS else None
        )
        for label in labels:
            missing = (
                label not in known if known is not None else not hasattr(blank, label)
            )
            if missing:
                raise ProjectionError(
                    self.target, f"no attribute named {label!r} (mode={self.mode.value})"
                )
            if known is None and not _is_writable(self.target, label):
                raise ProjectionError(
                    self.target, f"attribute {label!r} is read-only (mode={self.mode.value})"
                )

    def _empty_instance(self) -> Any:
        try:
            return self.target()
        except TypeError as e:
            raise ProjectionError(
                self.target, f"{self.mode.value} projection needs a no-argument constructor"
            ) from e

    def _construct(self, values: list[Any]) -> Any:
        try:
            return self.target(*values)
        except TypeError as e:
            raise ProjectionError(self.target, str(e)) from e

    def _assign(self, labels: list[str], values: list[Any]) -> Any:
        instance = self.target()
        for label, value in zip(labels, values):
            try:
                setattr(instance, label, value)
            except AttributeError as e:
                raise ProjectionError(self.target, str(e)) from e
        return instance

    def _inject(self, labels: list[str], values: list[Any]) -> Any:
        instance = self.target()
        state = getattr(instance, "__dict__", None)
        for label, value in zip(labels, values):
            if state is not None and label in state:
                state[label] = value
            else:
                # slot descriptors; also sidesteps a frozen __setattr__
                object.__setattr__(instance, label, value)
        return instance


def _field_names(instance: Any) -> set[str]:
    """Names held in the instance ``__dict__`` plus every slot declared on its class."""
    names = set(getattr(instance, "__dict__", ()))
    for klass in type(instance).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        names.update((slots,) if isinstance(slots, str) else slots)
    names.difference_update({"__dict__", "__weakref__"})
    return names


def _is_writable(target: type, name: str) -> bool:
    attr = getattr_static(target, name, None)
    if isinstance(attr, property):
        return attr.fset is not None
    return True


def bean(target: type, *exprs: Any) -> DtoBundle:
    """Project onto ``target`` through its attribute setters."""
    logger.debug("bean projection onto %s", target.__name__)
    return DtoBundle(target, ProjectionMode.BEAN, *exprs)


def fields(target: type, *exprs: Any) -> DtoBundle:
    """Project onto ``target`` by writing instance fields directly."""
    logger.debug("field projection onto %s", target.__name__)
    return DtoBundle(target, ProjectionMode.FIELDS, *exprs)


def constructor(target: type, *exprs: Any) -> DtoBundle:
    """Project onto ``target`` by passing the columns positionally to its constructor."""
    logger.debug("constructor projection onto %s", target.__name__)
    return DtoBundle(target, ProjectionMode.CONSTRUCTOR, *exprs)
