"""
Thin storage adapter over Django's default database connection.

Statements use ``%s`` positional placeholders and an ordered parameter list.
Database errors (``django.db.DatabaseError`` and subclasses) propagate to the
caller unchanged.
"""
import logging
from dataclasses import dataclass
from typing import Any, Sequence

from django.db import connection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    affected_rows: int
    last_insert_id: int | None = None


def _squash(sql: str) -> str:
    return " ".join(sql.split())


def fetch_all(sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
    """Run a read statement and return its rows as dicts keyed by column name."""
    logger.debug("fetch_all: %s params=%r", _squash(sql), list(params))
    with connection.cursor() as cursor:
        cursor.execute(sql, list(params))
        columns = [col[0] for col in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]


def execute(sql: str, params: Sequence[Any] = (), *, returning: str | None = None) -> WriteResult:
    """Run a write statement.

    Pass ``returning`` with the primary key column on inserts to get the
    generated identifier back in ``WriteResult.last_insert_id``.
    """
    sql = sql.strip().rstrip(";")
    logger.debug("execute: %s params=%r", _squash(sql), list(params))
    with connection.cursor() as cursor:
        if returning and connection.features.can_return_columns_from_insert:
            cursor.execute(f"{sql} RETURNING {connection.ops.quote_name(returning)}", list(params))
            row = cursor.fetchone()
            if row is None:
                return WriteResult(affected_rows=0)
            return WriteResult(affected_rows=1, last_insert_id=row[0])

        cursor.execute(sql, list(params))
        last_insert_id = cursor.lastrowid if returning else None
        return WriteResult(affected_rows=cursor.rowcount, last_insert_id=last_insert_id)
