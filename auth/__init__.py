# auth/__init__.py
"""Account validation and password hashing"""

from .validators import ValidationError, check_password, hash_password, validate_admin_input

__all__ = [
    'ValidationError',
    'check_password',
    'hash_password',
    'validate_admin_input',
]
