from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` and commit on success.

    Any ``mysql.connector.Error`` (connect, execute or commit) is rolled back
    and re-raised as ``StoreError`` so the HTTP layer can map it to 500.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.exception("Koneksi database gagal")
        raise StoreError(str(e)) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.exception("Query database gagal")
        raise StoreError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def query(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """Run a read statement and return rows as dicts."""
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return fetchall(cur)
