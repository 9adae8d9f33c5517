import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from visitor_pass.config import Settings, settings as default_settings
from visitor_pass.api.v1 import passes
from visitor_pass.api import pages
from visitor_pass.schemas.pass_schema import ErrorResponse, HealthResponse
from visitor_pass.services.cleanup import PassCleanupTask
from visitor_pass.services.pass_store import PassStore
from visitor_pass.services.passes import PassService
from visitor_pass.services.qr import QrOptions

# Настройка логирования
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None, clock: Optional[Callable[[], datetime]] = None) -> FastAPI:
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Хранилище живет ровно столько, сколько приложение
        store = PassStore(staleness_basis=config.CLEANUP_STALENESS_BASIS)
        service = PassService.from_settings(store, config, clock=clock)
        cleanup = PassCleanupTask(service, interval=config.CLEANUP_INTERVAL_SECONDS)

        app.state.settings = config
        app.state.pass_store = store
        app.state.pass_service = service
        app.state.qr_options = QrOptions.from_settings(config)
        app.state.pass_cleanup = cleanup

        cleanup.start()
        logger.info(
            "Visitor Pass Service запущен: port=%s, key_policy=%s, staleness_basis=%s",
            config.PORT,
            config.PASS_KEY_POLICY,
            config.CLEANUP_STALENESS_BASIS,
        )
        try:
            yield
        finally:
            await cleanup.stop()
            logger.info("Visitor Pass Service остановлен, пропусков в памяти: %s", len(store))

    app = FastAPI(title="Visitor Pass API", version="1.0.0", lifespan=lifespan)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # API отвечает в формате {success, error}, остальное как обычно в FastAPI
        if request.url.path.startswith("/api/"):
            logger.info(f"Некорректное тело запроса {request.url.path}: {exc.errors()}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=ErrorResponse(error="Invalid request body").model_dump(),
            )
        return await request_validation_exception_handler(request, exc)

    # Подключение роутеров
    app.include_router(passes.router, prefix="/api/pass", tags=["passes"])
    app.include_router(pages.router, tags=["pages"])

    @app.get("/health", response_model=HealthResponse)
    def health_check(request: Request):
        return HealthResponse(status="ok", passes=len(request.app.state.pass_store))

    return app


app = create_app()
