class PassError(Exception):
    """Базовая ошибка сервиса пропусков"""


class InvalidRequest(PassError):
    """Некорректный запрос на создание пропуска"""


class PassNotFound(PassError):
    """Пропуск не найден (не создавался или уже удален очисткой)"""

    def __init__(self, key: str):
        super().__init__(f"Pass '{key}' not found")
        self.key = key


class RenderFailure(PassError):
    """Не удалось сгенерировать QR-код"""
