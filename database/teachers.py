# database/teachers.py

"""Teacher records used by the teacher export and account checks"""

import logging

from auth.validators import hash_password
from util.date_utils import get_date_and_time
from .connection import get_connection, get_db_connection

logger = logging.getLogger(__name__)


def create_teacher(nombre, correo, carrera, password, now=None):
    """
    Create a teacher
    
    Returns:
        int: Id of the new teacher
    """
    stamp = get_date_and_time(now)
    with get_db_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("""
            INSERT INTO teachers (nombre, correo, carrera, fecha_registro, hora_registro, password)
            VALUES (?, ?, ?, ?, ?, ?)
        """, (nombre.strip(), correo.strip(), carrera, stamp["fecha"], stamp["hora"], hash_password(password)))
        teacher_id = cursor.lastrowid

    logger.info(f"Teacher '{correo}' created for {carrera}")
    return teacher_id


def get_teachers_by_career(carrera):
    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute("""
            SELECT nombre, correo, carrera, fecha_registro, hora_registro
            FROM teachers
            WHERE carrera = ?
            ORDER BY id
        """, (carrera,))
        return [
            {
                "nombre": row["nombre"],
                "correo": row["correo"],
                "carrera": row["carrera"],
                "fechaRegistro": row["fecha_registro"],
                "horaRegistro": row["hora_registro"],
            }
            for row in cursor.fetchall()
        ]
    finally:
        conn.close()


def email_belongs_to_teacher(correo):
    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute("SELECT 1 FROM teachers WHERE correo = ?", (correo.strip(),))
        return cursor.fetchone() is not None
    finally:
        conn.close()
