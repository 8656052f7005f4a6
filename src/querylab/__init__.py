"""querylab

A worked tour of the SQLAlchemy query builder over a small Member/Team model.
Projections, joins, subqueries, dynamic predicates, bulk operations, case
expressions and SQL functions are exercised against an embedded database.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
