# database/periods.py

"""School periods of each career"""

import sqlite3
import logging

from util.date_utils import get_date_and_time
from .connection import get_connection, get_db_connection

logger = logging.getLogger(__name__)


def create_period(periodo, clave_reticula, carrera, now=None):
    """
    Register a period for a career
    
    Returns:
        bool: True if created, False if the career already has that period
    """
    stamp = get_date_and_time(now)
    try:
        with get_db_connection() as conn:
            conn.execute("""
                INSERT INTO periods (periodo, clave_reticula, carrera, fecha_registro, hora_registro)
                VALUES (?, ?, ?, ?, ?)
            """, (periodo, clave_reticula, carrera, stamp["fecha"], stamp["hora"]))
    except sqlite3.IntegrityError:
        logger.warning(f"Period '{periodo}' already exists for {carrera}")
        return False

    logger.info(f"Period '{periodo}' created for {carrera}")
    return True


def get_periods_by_career(carrera):
    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute("""
            SELECT periodo, clave_reticula, carrera, fecha_registro, hora_registro
            FROM periods
            WHERE carrera = ?
            ORDER BY id
        """, (carrera,))
        return [
            {
                "periodo": row["periodo"],
                "claveReticula": row["clave_reticula"],
                "carrera": row["carrera"],
                "fechaRegistro": row["fecha_registro"],
                "horaRegistro": row["hora_registro"],
            }
            for row in cursor.fetchall()
        ]
    finally:
        conn.close()
