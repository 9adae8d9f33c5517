import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "3000"))
    # Базовый адрес для ссылок на пропуск; если пусто, берется из запроса
    PUBLIC_BASE_URL: str = os.getenv("PUBLIC_BASE_URL", "").rstrip("/")

    # Timezone
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

    # Passes
    PASS_TTL_HOURS: int = int(os.getenv("PASS_TTL_HOURS", "24"))
    # request_id | token
    PASS_KEY_POLICY: str = os.getenv("PASS_KEY_POLICY", "request_id")

    # Cleanup
    CLEANUP_INTERVAL_SECONDS: int = int(os.getenv("CLEANUP_INTERVAL_SECONDS", "3600"))
    # expires_at | created_at
    CLEANUP_STALENESS_BASIS: str = os.getenv("CLEANUP_STALENESS_BASIS", "expires_at")
    CLEANUP_RETENTION_HOURS: int = int(os.getenv("CLEANUP_RETENTION_HOURS", "1"))

    # QR
    QR_WIDTH: int = int(os.getenv("QR_WIDTH", "350"))
    QR_MARGIN: int = int(os.getenv("QR_MARGIN", "2"))
    QR_DARK_COLOR: str = os.getenv("QR_DARK_COLOR", "#000000")
    QR_LIGHT_COLOR: str = os.getenv("QR_LIGHT_COLOR", "#FFFFFF")
    QR_ERROR_CORRECTION: str = os.getenv("QR_ERROR_CORRECTION", "M")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
