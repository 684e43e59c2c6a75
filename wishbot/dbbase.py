"""Database connection and the shared machinery of the query classes."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any
from urllib.parse import quote_plus

import sqlalchemy as sa
from sqlalchemy.engine import Engine, RowMapping

from .config import Postgres

logger = logging.getLogger(__name__)


class NoRowsError(LookupError):
    """Raised when a query that must return a row returns none."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


class QueriesBase:
    """Runs SQL statements, each in its own transaction, on an engine."""

    def __init__(self, conn: Engine) -> None:
        self.conn = conn

    @staticmethod
    def _bind(params: dict[str, Any]) -> dict[str, Any]:
        return {
            name: str(value) if isinstance(value, uuid.UUID) else value
            for name, value in params.items()
        }

    def _fetch_one(self, sql: str, /, **params: Any) -> RowMapping:
        with self.conn.begin() as connection:
            row = connection.execute(sa.text(sql), self._bind(params)).mappings().first()
        if row is None:
            raise NoRowsError()
        return row

    def _fetch_all(self, sql: str, /, **params: Any) -> list[RowMapping]:
        with self.conn.begin() as connection:
            return list(connection.execute(sa.text(sql), self._bind(params)).mappings().all())

    def _execute(self, sql: str, /, **params: Any) -> int:
        with self.conn.begin() as connection:
            return connection.execute(sa.text(sql), self._bind(params)).rowcount

    @staticmethod
    def _uuid(value: Any) -> uuid.UUID:
        return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))

    @staticmethod
    def _timestamp(value: Any) -> datetime | None:
        if value is None or isinstance(value, datetime):
            return value
        return datetime.fromisoformat(str(value))


def build_dsn(postgres: Postgres) -> str:
    """Build the PostgreSQL connection URL for the given settings."""
    return (
        f"postgresql://{postgres.user_name}:{quote_plus(postgres.password)}"
        f"@{postgres.host}/{postgres.database}?sslmode={postgres.ssl_mode}"
    )


def init_db(postgres: Postgres) -> Engine:
    """Connect to the database, check that it answers, and return the engine."""
    engine = sa.create_engine(build_dsn(postgres))
    with engine.connect() as connection:
        connection.execute(sa.text("SELECT 1"))
    logger.info("Successfully connected to database")
    return engine