"""Query execution that tolerates sources which are not provisioned yet.

Exactly one failure class is absorbed: the relation does not exist
(PostgreSQL SQLSTATE 42P01, undefined_table). It is recognised from the
driver's error code on DBAPIError.orig, never from message text. Every
other database error becomes SourceFailureException and aborts the request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Executable

from assignment_hub.domain.enums import ItemType
from assignment_hub.domain.exceptions import SourceFailureException

logger = logging.getLogger(__name__)

UNDEFINED_TABLE_SQLSTATE = "42P01"


class QueryFault(str, Enum):
    """Classification of a failed source query."""

    MISSING_SOURCE = "missing_source"
    SOURCE_FAILURE = "source_failure"


def _sqlstate(exc: DBAPIError) -> str | None:
    """Return the SQLSTATE carried by the driver error, if any.

    asyncpg (via SQLAlchemy's adapter) and psycopg 3 expose ``sqlstate``;
    psycopg2 exposes ``pgcode``.
    """
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify_db_error(exc: DBAPIError) -> QueryFault:
    """Return MISSING_SOURCE for undefined_table, SOURCE_FAILURE otherwise."""
    if _sqlstate(exc) == UNDEFINED_TABLE_SQLSTATE:
        return QueryFault.MISSING_SOURCE
    return QueryFault.SOURCE_FAILURE


class SafeQueryExecutor:
    """Run one read statement per session, absorbing missing relations."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def fetch_all(
        self, stmt: Executable, *, source: ItemType
    ) -> list[Mapping[str, Any]]:
        """Return all rows as mappings; [] when the source relation is missing."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return [dict(row) for row in result.mappings().all()]
        except DBAPIError as exc:
            self._absorb_or_raise(exc, source)
            return []

    async def fetch_count(self, stmt: Executable, *, source: ItemType) -> int:
        """Return a single COUNT value; 0 when the source relation is missing."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return int(result.scalar_one())
        except DBAPIError as exc:
            self._absorb_or_raise(exc, source)
            return 0

    def _absorb_or_raise(self, exc: DBAPIError, source: ItemType) -> None:
        if classify_db_error(exc) is QueryFault.MISSING_SOURCE:
            logger.warning(
                "Source %s is not provisioned (undefined table); treating as empty",
                source.value,
            )
            return
        logger.error(
            "Source %s query failed (sqlstate=%s): %s",
            source.value,
            _sqlstate(exc),
            exc.orig,
        )
        raise SourceFailureException(source.value, str(exc.orig)) from exc
