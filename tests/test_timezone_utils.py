from datetime import datetime, timedelta, timezone

from diccionario.utils.timezone_utils import TimezoneUtils


def test_utc_now_is_timezone_aware():
    assert TimezoneUtils.utc_now().tzinfo is timezone.utc


def test_isoformat_treats_naive_values_as_utc():
    naive = datetime(2024, 5, 1, 12, 30)

    assert TimezoneUtils.isoformat(naive) == '2024-05-01T12:30:00+00:00'


def test_isoformat_keeps_existing_offset():
    aware = datetime(2024, 5, 1, 12, 30, tzinfo=timezone(timedelta(hours=-5)))

    assert TimezoneUtils.isoformat(aware) == '2024-05-01T12:30:00-05:00'


def test_isoformat_passes_none_through():
    assert TimezoneUtils.isoformat(None) is None
