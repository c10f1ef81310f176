from typing import Any, Mapping, Optional

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from core.log import logger


class StorageError(Exception):
    """Raised for any failure surfaced by the underlying database."""


class RecordStore:
    """Thin adapter over a SQLAlchemy engine.

    Every call takes a SQL statement with named bind parameters and a mapping
    of values for them. Rows come back as plain dicts keyed by column name.
    Errors are never retried; they are re-raised as ``StorageError``.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def fetch_one(
        self, statement: str, params: Optional[Mapping[str, Any]] = None
    ) -> Optional[dict]:
        try:
            with self.engine.connect() as conn:
                row = conn.execute(text(statement), dict(params or {})).mappings().first()
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"fetch_one failed: {e}")
            raise StorageError(str(e)) from e
        return dict(row) if row is not None else None

    def fetch_many(
        self, statement: str, params: Optional[Mapping[str, Any]] = None
    ) -> list[dict]:
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(text(statement), dict(params or {})).mappings().all()
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"fetch_many failed: {e}")
            raise StorageError(str(e)) from e
        return [dict(row) for row in rows]

    def execute(
        self, statement: str, params: Optional[Mapping[str, Any]] = None
    ) -> int:
        """Run a mutation in its own transaction and return the affected row count."""
        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(statement), dict(params or {}))
                return result.rowcount
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"execute failed: {e}")
            raise StorageError(str(e)) from e

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageError(str(e)) from e
        return True

    def close(self) -> None:
        self.engine.dispose()
