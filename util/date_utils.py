# util/date_utils.py

"""Spanish (es-MX) date and time strings used in report headers and records"""

from datetime import datetime

MONTHS_ES = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]


def format_date_es(value):
    """Format a date as '05 de marzo de 2026'"""
    return f"{value.day:02d} de {MONTHS_ES[value.month - 1]} de {value.year}"


def format_time_es(value):
    return value.strftime("%H:%M:%S")


def get_date_and_time(now=None):
    """
    Current date and time formatted for documents

    Args:
        now: Optional datetime to format instead of the current time

    Returns:
        dict: {"fecha": "19 de octubre de 2026", "hora": "18:55:02"}
    """
    now = now or datetime.now()
    return {
        "fecha": format_date_es(now),
        "hora": format_time_es(now),
    }
