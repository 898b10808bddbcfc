# database/schema.py

"""Database schema definitions and table creation"""

import logging
from .connection import get_db_connection

logger = logging.getLogger(__name__)


def create_tables():
    """Create all database tables"""
    with get_db_connection() as conn:
        cursor = conn.cursor()

        # Administrators table
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS admins (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                nombre TEXT NOT NULL,
                correo TEXT NOT NULL UNIQUE COLLATE NOCASE,
                cuenta TEXT NOT NULL DEFAULT 'Administrador',
                carrera TEXT,
                fecha_registro TEXT NOT NULL,
                hora_registro TEXT NOT NULL,
                password TEXT NOT NULL,
                ultima_sesion TEXT DEFAULT '',
                codigo_acceso TEXT DEFAULT '',
                validez_codigo_acceso INTEGER DEFAULT 0
            )
        """)

        # Teachers table
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS teachers (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                nombre TEXT NOT NULL,
                correo TEXT NOT NULL UNIQUE COLLATE NOCASE,
                carrera TEXT NOT NULL,
                fecha_registro TEXT NOT NULL,
                hora_registro TEXT NOT NULL,
                password TEXT NOT NULL
            )
        """)

        # Periods table
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS periods (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                periodo TEXT NOT NULL,
                clave_reticula TEXT NOT NULL,
                carrera TEXT NOT NULL,
                fecha_registro TEXT NOT NULL,
                hora_registro TEXT NOT NULL,
                UNIQUE(periodo, carrera)
            )
        """)

        cursor.execute("CREATE INDEX IF NOT EXISTS idx_teachers_carrera ON teachers(carrera)")
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_periods_carrera ON periods(carrera)")

    logger.info("Database tables created successfully")
