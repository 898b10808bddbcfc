# database/connection.py

"""Database connection management"""

import sqlite3
import os
import logging
from contextlib import contextmanager

from config import DB_CONFIG

DB_PATH = DB_CONFIG['path']

logger = logging.getLogger(__name__)


def get_connection():
    """
    Get database connection with foreign keys enabled
    
    Returns:
        sqlite3.Connection: Database connection with Row factory
    """
    directory = os.path.dirname(DB_PATH)
    if directory:
        os.makedirs(directory, exist_ok=True)
    conn = sqlite3.connect(DB_PATH)
    if DB_CONFIG['enable_foreign_keys']:
        conn.execute("PRAGMA foreign_keys = ON")
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_db_connection():
    """
    Context manager for database connections with automatic commit/rollback
    
    Usage:
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM admins")
    
    Yields:
        sqlite3.Connection: Database connection
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
