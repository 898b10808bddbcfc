"""
Tests for Spanish date formatting
"""
from datetime import datetime

from util.date_utils import format_date_es, format_time_es, get_date_and_time


def test_format_date():
    assert format_date_es(datetime(2026, 10, 19)) == "19 de octubre de 2026"
    assert format_date_es(datetime(2026, 3, 5)) == "05 de marzo de 2026"


def test_format_time_is_24_hour():
    assert format_time_es(datetime(2026, 1, 1, 18, 5, 2)) == "18:05:02"


def test_get_date_and_time():
    assert get_date_and_time(datetime(2026, 12, 1, 7, 0, 0)) == {
        "fecha": "01 de diciembre de 2026",
        "hora": "07:00:00",
    }


def test_get_date_and_time_defaults_to_now():
    result = get_date_and_time()
    assert str(datetime.now().year) in result["fecha"]
