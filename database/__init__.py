# database/__init__.py

"""
Database package - administrator accounts and the records behind the exports
"""

from .connection import get_connection, get_db_connection
from .schema import create_tables

from .admins import (
    AccountConflictError,
    create_admin_account,
    delete_admin,
    get_admin_by_email,
    get_admin_by_id,
    get_all_admins,
    list_admins,
)

from .teachers import (
    create_teacher,
    email_belongs_to_teacher,
    get_teachers_by_career,
)

from .periods import (
    create_period,
    get_periods_by_career,
)

__all__ = [
    # Connection
    'get_connection',
    'get_db_connection',

    # Schema
    'create_tables',

    # Admins
    'AccountConflictError',
    'create_admin_account',
    'delete_admin',
    'get_admin_by_email',
    'get_admin_by_id',
    'get_all_admins',
    'list_admins',

    # Teachers
    'create_teacher',
    'email_belongs_to_teacher',
    'get_teachers_by_career',

    # Periods
    'create_period',
    'get_periods_by_career',
]
