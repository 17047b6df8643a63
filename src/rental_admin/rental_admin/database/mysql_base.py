from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, time, timedelta
from typing import Any, Optional

from .connection import DatabaseConnection

log = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, roll back on any error."""

    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        log.debug("rolling back transaction", exc_info=True)
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[dict]:
    return cur.fetchone() or None


def fetchall(cur) -> list[dict]:
    return list(cur.fetchall() or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Clock times from a TIME column.

    The pure-python connector hands TIME back as ``timedelta`` since midnight,
    the C extension as ``time``; older dumps may hold ``'HH:MM[:SS]'`` text.
    """

    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return time(seconds // 3600, seconds % 3600 // 60, seconds % 60)
    if isinstance(value, str):
        text = value.strip()
        fmt = "%H:%M:%S" if text.count(":") == 2 else "%H:%M"
        return datetime.strptime(text, fmt).time()
    raise TypeError(f"Unsupported TIME value: {value!r}")


def optional_float(value: Any) -> Optional[float]:
    """DECIMAL columns come back as Decimal; NULL stays None."""

    return None if value is None else float(value)
