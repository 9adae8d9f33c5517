from datetime import datetime, timedelta
from typing import Tuple

DEFAULT_PASS_TTL = timedelta(hours=24)


def compute_default_window(now: datetime, ttl: timedelta = DEFAULT_PASS_TTL) -> Tuple[datetime, datetime]:
    """Окно действия по умолчанию: с текущего момента на ttl вперед"""
    return now, now + ttl


def is_expired(now: datetime, valid_to: datetime) -> bool:
    return now > valid_to


def is_stale(now: datetime, reference: datetime, retention: timedelta) -> bool:
    """Запись устарела, если с reference прошло больше retention"""
    return now - reference > retention
