from datetime import datetime, timedelta

from pytz import utc

from visitor_pass.services.expiry import compute_default_window, is_expired, is_stale

NOW = utc.localize(datetime(2026, 10, 18, 12, 0, 0))


def test_default_window_starts_now_and_lasts_24_hours():
    valid_from, valid_to = compute_default_window(NOW)
    assert valid_from == NOW
    assert valid_to == NOW + timedelta(hours=24)


def test_default_window_respects_custom_ttl():
    _, valid_to = compute_default_window(NOW, timedelta(hours=2))
    assert valid_to == NOW + timedelta(hours=2)


def test_is_expired_is_strict():
    assert is_expired(NOW, NOW) is False
    assert is_expired(NOW + timedelta(seconds=1), NOW) is True
    assert is_expired(NOW - timedelta(hours=1), NOW) is False


def test_is_stale_only_past_retention():
    retention = timedelta(hours=1)
    assert is_stale(NOW + timedelta(hours=1), NOW, retention) is False
    assert is_stale(NOW + timedelta(hours=1, seconds=1), NOW, retention) is True
    assert is_stale(NOW, NOW, retention) is False
