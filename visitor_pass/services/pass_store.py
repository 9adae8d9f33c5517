import logging
import threading
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from visitor_pass.models.pass_record import PassRecord
from visitor_pass.services.expiry import is_stale

logger = logging.getLogger(__name__)

STALENESS_BASIS_EXPIRES_AT = "expires_at"
STALENESS_BASIS_CREATED_AT = "created_at"
STALENESS_BASES = (STALENESS_BASIS_EXPIRES_AT, STALENESS_BASIS_CREATED_AT)

# Сколько удаленных ключей показывать в debug-логе
SWEEP_LOG_SAMPLE_SIZE = 10


class PassStore:
    """
    Хранилище пропусков в памяти процесса.

    Все операции выполняются под одной блокировкой: обработчики FastAPI
    работают в пуле потоков, а очистка идет из фоновой задачи.
    """

    def __init__(self, staleness_basis: str = STALENESS_BASIS_EXPIRES_AT) -> None:
        if staleness_basis not in STALENESS_BASES:
            raise ValueError(f"Unknown staleness basis: {staleness_basis!r}")
        self.staleness_basis = staleness_basis
        self._passes: Dict[str, PassRecord] = {}
        self._lock = threading.Lock()

    def insert(self, key: str, record: PassRecord) -> None:
        with self._lock:
            self._passes[key] = record

    def lookup(self, key: str) -> Optional[PassRecord]:
        """Возвращает копию записи или None"""
        with self._lock:
            record = self._passes.get(key)
            if record is None:
                return None
            return replace(record)

    def sweep(self, now: datetime, retention: timedelta) -> int:
        """Удаляет устаревшие записи. Возвращает количество удаленных"""
        with self._lock:
            stale_keys = [
                key
                for key, record in self._passes.items()
                if is_stale(now, self._reference_time(record), retention)
            ]
            for key in stale_keys:
                del self._passes[key]

        if stale_keys:
            sample = ", ".join(stale_keys[:SWEEP_LOG_SAMPLE_SIZE])
            rest = len(stale_keys) - SWEEP_LOG_SAMPLE_SIZE
            if rest > 0:
                sample = f"{sample} (и еще {rest})"
            logger.debug("Удалены пропуска: %s", sample)
        return len(stale_keys)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._passes.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._passes)

    def _reference_time(self, record: PassRecord) -> datetime:
        if self.staleness_basis == STALENESS_BASIS_CREATED_AT:
            return record.created_at
        return record.valid_to
