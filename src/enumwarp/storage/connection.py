"""PostgreSQL connection management"""
from contextlib import contextmanager
from typing import Generator, Optional

import psycopg2
from psycopg2.extensions import connection as PgConnection

from ..config import DatabaseSettings


def get_connection_string(db: Optional[DatabaseSettings] = None) -> str:
    return (db or DatabaseSettings.from_env()).to_dsn()


@contextmanager
def get_connection(db: Optional[DatabaseSettings] = None) -> Generator[PgConnection, None, None]:
    """
    Open a connection for one unit of work.

    Commits when the block exits cleanly and rolls back if it raises,
    so a half-finished table replace never becomes visible.

    Usage:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
    """
    conn = psycopg2.connect(get_connection_string(db))
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
