from datetime import datetime

from utils.formatting import format_date


def test_format_date():
    assert format_date(datetime(2021, 1, 1, 9, 5, 7)) == "01.01.2021 09:05:07"


def test_format_date_uses_twelve_hour_clock():
    assert format_date(datetime(2020, 7, 9)) == "09.07.2020 12:00:00"
    assert format_date(datetime(2020, 7, 9, 18, 30)) == "09.07.2020 06:30:00"


def test_format_date_none():
    assert format_date(None) is None
