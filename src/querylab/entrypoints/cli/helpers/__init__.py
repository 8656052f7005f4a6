"""CLI helpers for querylab.

Database URL resolution and redaction, status messages on stderr, and the
logger-level option parser.
"""

from .db_url import resolve_db_url, sanitize_url
from .messages import error, success, warn

__all__ = ["resolve_db_url", "sanitize_url", "warn", "success", "error"]
