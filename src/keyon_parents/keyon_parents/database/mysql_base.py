from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, Iterator, List, Optional

import mysql.connector

from ..core.exceptions import FetchFailure, StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def read_cursor(conn_factory: DatabaseConnection, what: str) -> Iterator[Any]:
    """Cursor for upstream reads; driver errors surface as FetchFailure."""

    try:
        with db_cursor(conn_factory) as (_, cur):
            yield cur
    except mysql.connector.Error as e:
        logger.warning("read failed (%s): %s", what, e)
        raise FetchFailure(f"No se pudo leer {what}") from e


@contextmanager
def write_cursor(conn_factory: DatabaseConnection, what: str) -> Iterator[Any]:
    """Cursor for writes; driver errors surface as StorageError."""

    try:
        with db_cursor(conn_factory) as (_, cur):
            yield cur
    except mysql.connector.Error as e:
        logger.error("write failed (%s): %s", what, e)
        raise StorageError(f"No se pudo guardar {what}") from e


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '07:15:00')
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        seconds = total_seconds % 60
        return time(hour=hours, minute=minutes, second=seconds)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(hour=hours, minute=minutes, second=seconds)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")


def load_json_column(value: Any) -> dict:
    if not value:
        return {}
    if isinstance(value, dict):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    return dict(json.loads(value))
