# database/admins.py

"""Administrator account operations"""

import math
import sqlite3
import logging

from auth.config import MESSAGES
from auth.validators import ValidationError, hash_password, validate_admin_input
from util.date_utils import get_date_and_time
from .connection import get_connection, get_db_connection
from .teachers import email_belongs_to_teacher

logger = logging.getLogger(__name__)

ADMIN_COLUMNS = "id, nombre, correo, cuenta, carrera, fecha_registro, hora_registro"


class AccountConflictError(Exception):
    """The email of a new account is already in use"""


def _row_to_admin(row):
    return {
        "id": row["id"],
        "nombre": row["nombre"],
        "correo": row["correo"],
        "cuenta": row["cuenta"],
        "carrera": row["carrera"],
        "fechaRegistro": row["fecha_registro"],
        "horaRegistro": row["hora_registro"],
    }


def _escape_like(value):
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def get_admin_by_email(correo):
    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(f"SELECT {ADMIN_COLUMNS} FROM admins WHERE correo = ?", (correo.strip(),))
        row = cursor.fetchone()
        return _row_to_admin(row) if row else None
    finally:
        conn.close()


def get_admin_by_id(admin_id):
    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(f"SELECT {ADMIN_COLUMNS} FROM admins WHERE id = ?", (admin_id,))
        row = cursor.fetchone()
        return _row_to_admin(row) if row else None
    finally:
        conn.close()


def create_admin_account(nombre, correo, password, carrera=None, now=None):
    """
    Register a new administrator
    
    Args:
        nombre: Full name
        correo: Email, must not belong to another administrator or a teacher
        password: Plain text password, stored as a bcrypt hash
        carrera: Optional career the administrator coordinates
        now: Optional datetime used as registration date
    
    Returns:
        dict: The created administrator (without password)
    
    Raises:
        ValidationError: If the input is incomplete or malformed
        AccountConflictError: If the email is already registered
    """
    is_valid, error_message = validate_admin_input(nombre, correo, password)
    if not is_valid:
        raise ValidationError(error_message)

    correo = correo.strip()
    if get_admin_by_email(correo):
        logger.warning(f"Admin registration rejected, email already registered: {correo}")
        raise AccountConflictError(MESSAGES["email_taken_admin"])
    if email_belongs_to_teacher(correo):
        logger.warning(f"Admin registration rejected, email belongs to a teacher: {correo}")
        raise AccountConflictError(MESSAGES["email_taken_teacher"])

    stamp = get_date_and_time(now)
    try:
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO admins (nombre, correo, cuenta, carrera, fecha_registro, hora_registro, password)
                VALUES (?, ?, 'Administrador', ?, ?, ?, ?)
            """, (nombre.strip(), correo, carrera, stamp["fecha"], stamp["hora"], hash_password(password)))
            admin_id = cursor.lastrowid
    except sqlite3.IntegrityError as e:
        # Concurrent registration of the same email
        raise AccountConflictError(MESSAGES["email_taken_admin"]) from e

    logger.info(f"Admin '{correo}' created successfully")
    return get_admin_by_id(admin_id)


def list_admins(search="", page=1, page_size=10):
    """
    Paginated administrator listing filtered by name or email
    
    Args:
        search: Case-insensitive substring matched against name or email
        page: 1-based page number
        page_size: Administrators per page
    
    Returns:
        dict: success flag, admins of the page and pagination totals
    """
    page = max(int(page), 1)
    page_size = max(int(page_size), 1)
    pattern = f"%{_escape_like(search or '')}%"
    where = "WHERE nombre LIKE ? ESCAPE '\\' OR correo LIKE ? ESCAPE '\\'"

    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(f"""
            SELECT {ADMIN_COLUMNS} FROM admins
            {where}
            ORDER BY id
            LIMIT ? OFFSET ?
        """, (pattern, pattern, page_size, (page - 1) * page_size))
        admins = [_row_to_admin(row) for row in cursor.fetchall()]

        cursor.execute(f"SELECT COUNT(*) FROM admins {where}", (pattern, pattern))
        total = cursor.fetchone()[0]
    finally:
        conn.close()

    if not admins:
        return {
            "success": False,
            "message": MESSAGES["no_admins_found"],
        }

    return {
        "success": True,
        "admins": admins,
        "currentPage": page,
        "pageSize": page_size,
        "totalItems": total,
        "totalPages": math.ceil(total / page_size),
    }


def get_all_admins():
    """All administrators in registration order, for exports"""
    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(f"SELECT {ADMIN_COLUMNS} FROM admins ORDER BY id")
        return [_row_to_admin(row) for row in cursor.fetchall()]
    finally:
        conn.close()


def delete_admin(admin_id):
    """
    Delete an administrator
    
    Returns:
        bool: True if deleted, False if no administrator has that id
    """
    if not get_admin_by_id(admin_id):
        logger.warning(f"Admin {admin_id} not deleted, it does not exist")
        return False

    with get_db_connection() as conn:
        conn.execute("DELETE FROM admins WHERE id = ?", (admin_id,))

    logger.info(f"Admin {admin_id} deleted")
    return True
