# auth/validators.py
"""Account input validation and password hashing"""

import re
import logging
from typing import Tuple

import bcrypt

from .config import BCRYPT_ROUNDS, EMAIL_PATTERN, MESSAGES, MIN_PASSWORD_LENGTH

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Account data rejected before reaching the database"""


def validate_admin_input(nombre: str, correo: str, password: str) -> Tuple[bool, str]:
    """
    Validate the data of a new administrator account
    
    Args:
        nombre: Full name
        correo: Email address
        password: Plain text password
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not nombre or not nombre.strip():
        return False, MESSAGES["name_required"]

    if not correo or not correo.strip():
        return False, MESSAGES["email_required"]

    if not re.match(EMAIL_PATTERN, correo.strip()):
        return False, MESSAGES["email_invalid"]

    if not password or not password.strip():
        return False, MESSAGES["password_required"]

    if len(password) < MIN_PASSWORD_LENGTH:
        return False, MESSAGES["password_too_short"]

    return True, ""


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode('utf-8')


def check_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False
