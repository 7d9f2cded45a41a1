from __future__ import annotations

import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.constants import MONEY_QUANT
from ..core.exceptions import StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Open a connection, yield (conn, cursor), commit on success and roll back on error.

    Driver errors are re-raised as StorageError; domain errors pass through untouched.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        logger.exception("Database connection failed")
        raise StorageError("Database unavailable") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        logger.exception("Database operation failed")
        raise StorageError("Database operation failed") from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def borrowed_cursor(cur):
    """Yield an already-open cursor; the owner of the connection commits."""

    yield None, cur


class MySQLRepository:
    """Base for MySQL repositories.

    A repository either opens its own short-lived connection per call, or is bound
    to the cursor of an enclosing unit of work (see ``bind``).
    """

    def __init__(self, conn_factory: DatabaseConnection, *, cursor=None):
        self._conn_factory = conn_factory
        self._bound_cursor = cursor

    def bind(self, cursor):
        return type(self)(self._conn_factory, cursor=cursor)

    def _cursor(self):
        if self._bound_cursor is not None:
            return borrowed_cursor(self._bound_cursor)
        return db_cursor(self._conn_factory)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def is_duplicate_key(exc: Exception) -> bool:
    return isinstance(exc, mysql.connector.IntegrityError) and exc.errno == errorcode.ER_DUP_ENTRY


def as_money(value: Any) -> Decimal:
    """Normalize DECIMAL/SUM() results; SUM over no rows comes back as NULL."""

    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(MONEY_QUANT)
