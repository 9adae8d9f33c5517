import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple
from urllib.parse import quote

from pytz import timezone

from visitor_pass.config import settings
from visitor_pass.errors import InvalidRequest, PassNotFound
from visitor_pass.models.pass_record import PassRecord, PASS_STATUS_ACTIVE, PASS_STATUS_EXPIRED
from visitor_pass.schemas.pass_schema import PassCreate
from visitor_pass.services.expiry import compute_default_window, is_expired
from visitor_pass.services.pass_store import PassStore
from visitor_pass.services.tokens import generate_pass_token

logger = logging.getLogger(__name__)

KEY_POLICY_REQUEST_ID = "request_id"
KEY_POLICY_TOKEN = "token"
KEY_POLICIES = (KEY_POLICY_REQUEST_ID, KEY_POLICY_TOKEN)


@dataclass
class CreatedPass:
    record: PassRecord
    pass_url: str


def build_pass_url(base_url: str, key: str) -> str:
    # requestId может содержать "/", "?", "#" и пробелы
    return f"{base_url.rstrip('/')}/pass/{quote(key, safe='')}"


class PassService:
    """
    Бизнес-логика пропусков: создание, получение, очистка устаревших.

    key_policy:
        request_id - ключ в хранилище совпадает с requestId, повторное создание перезаписывает пропуск
        token - ключ генерируется, requestId хранится только для отображения
    """

    def __init__(
        self,
        store: PassStore,
        ttl: timedelta = timedelta(hours=24),
        retention: timedelta = timedelta(hours=1),
        key_policy: str = KEY_POLICY_REQUEST_ID,
        tz_name: str = "UTC",
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if key_policy not in KEY_POLICIES:
            raise ValueError(f"Unknown key policy: {key_policy!r}")
        self.store = store
        self.ttl = ttl
        self.retention = retention
        self.key_policy = key_policy
        self.tz = timezone(tz_name)
        self._clock = clock or (lambda: datetime.now(self.tz))

    @classmethod
    def from_settings(cls, store: PassStore, config=settings, clock: Optional[Callable[[], datetime]] = None) -> "PassService":
        return cls(
            store,
            ttl=timedelta(hours=config.PASS_TTL_HOURS),
            retention=timedelta(hours=config.CLEANUP_RETENTION_HOURS),
            key_policy=config.PASS_KEY_POLICY,
            tz_name=config.TIMEZONE,
            clock=clock,
        )

    def now(self) -> datetime:
        return self._clock()

    def create(self, data: PassCreate, base_url: str) -> CreatedPass:
        request_id = (data.request_id or "").strip()
        if not request_id:
            raise InvalidRequest("requestId is required")

        now = self.now()
        valid_from, valid_to = compute_default_window(now, self.ttl)
        if data.valid_from is not None:
            valid_from = self._localize(data.valid_from)
        if data.valid_to is not None:
            valid_to = self._localize(data.valid_to)
        if valid_from > valid_to:
            raise InvalidRequest("validFrom must not be later than validTo")

        key = self._make_key(request_id, now)
        record = PassRecord(
            id=key,
            request_id=request_id,
            created_at=now,
            valid_from=valid_from,
            valid_to=valid_to,
            visitor_name=data.visitor_name or "",
            visitor_email=data.visitor_email or "",
            visitor_phone=data.visitor_phone or "",
            host_name=data.host_name or "",
            location=data.location or "",
            purpose=data.purpose or "",
        )
        self.store.insert(key, record)

        logger.info(f"Создан пропуск: key={key}, request_id={request_id}, valid_to={valid_to.isoformat()}")
        return CreatedPass(record=record, pass_url=build_pass_url(base_url, key))

    def get(self, key: str) -> Tuple[PassRecord, bool]:
        """Возвращает (запись, истек ли срок). Истекший пропуск не считается отсутствующим"""
        record = self.store.lookup(key)
        if record is None:
            raise PassNotFound(key)

        expired = is_expired(self.now(), record.valid_to)
        record.status = PASS_STATUS_EXPIRED if expired else PASS_STATUS_ACTIVE
        return record, expired

    def sweep(self) -> int:
        return self.store.sweep(self.now(), self.retention)

    def _make_key(self, request_id: str, now: datetime) -> str:
        if self.key_policy == KEY_POLICY_TOKEN:
            return generate_pass_token(request_id, now)
        return request_id

    def _localize(self, value: datetime) -> datetime:
        """Время без часового пояса считаем локальным для настроек"""
        if value.tzinfo is None:
            return self.tz.localize(value)
        return value
