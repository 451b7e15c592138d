"""Store error taxonomy and translation of SQLAlchemy failures into it.

Every store operation runs inside ``translate_db_errors`` so callers only
ever see ``StoreError`` subclasses, with the driver exception chained as
``__cause__``. Nothing here retries.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from loguru import logger
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError

# SQLSTATE for unique_violation on PostgreSQL
_PG_UNIQUE_VIOLATION = "23505"


class StoreError(Exception):
    """Generic backing-store failure."""


class NotFoundError(StoreError):
    """The entity is absent, outside the queried scope, or soft-deleted."""

    def __init__(self, kind: str, key: str):
        super().__init__(f"{kind} {key!r} not found")
        self.kind = kind
        self.key = key


class AlreadyExistsError(StoreError):
    """A create violated a unique constraint."""

    def __init__(self, kind: str, key: str):
        super().__init__(f"{kind} {key!r} already exists")
        self.kind = kind
        self.key = key


class UnavailableError(StoreError):
    """The backing store could not complete the operation."""


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "pgcode", None) == _PG_UNIQUE_VIOLATION:
        return True
    msg = str(orig).lower()
    return "unique constraint" in msg or "duplicate key" in msg or "duplicate entry" in msg


@contextmanager
def translate_db_errors(kind: str, key: str) -> Iterator[None]:
    """Map SQLAlchemy exceptions raised inside the block onto the store taxonomy."""
    try:
        yield
    except StoreError:
        raise
    except IntegrityError as exc:
        if is_unique_violation(exc):
            raise AlreadyExistsError(kind, key) from exc
        logger.warning(f"Integrity error on {kind} {key!r}: {exc.orig}")
        raise StoreError(f"{kind} {key!r}: integrity error") from exc
    except OperationalError as exc:
        logger.error(f"Database unavailable while handling {kind} {key!r}: {exc.orig}")
        raise UnavailableError(f"{kind} {key!r}: database unavailable") from exc
    except (DBAPIError, SQLAlchemyError) as exc:
        logger.error(f"Database error while handling {kind} {key!r}: {exc}")
        raise StoreError(f"{kind} {key!r}: database error") from exc
