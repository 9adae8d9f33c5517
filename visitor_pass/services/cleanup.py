import asyncio
import logging
from typing import Optional

import anyio

from visitor_pass.services.passes import PassService

logger = logging.getLogger(__name__)


class PassCleanupTask:
    """Периодическая очистка устаревших пропусков, живет вместе с приложением"""

    def __init__(self, service: PassService, interval: float = 3600.0) -> None:
        self.service = service
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def run_once(self) -> int:
        # sweep берет threading.Lock, поэтому уводим его из event loop
        removed = await anyio.to_thread.run_sync(self.service.sweep)
        if removed > 0:
            logger.info(f"Очистка: удалено устаревших пропусков: {removed}")
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self.run_once()
            except Exception:
                logger.exception("Ошибка при очистке пропусков")
