from fastapi import Request

from visitor_pass.services.passes import PassService
from visitor_pass.services.qr import QrOptions


def get_pass_service(request: Request) -> PassService:
    """Сервис пропусков, созданный в lifespan приложения"""
    return request.app.state.pass_service


def get_qr_options(request: Request) -> QrOptions:
    return request.app.state.qr_options


def get_base_url(request: Request) -> str:
    """Базовый адрес для ссылки на пропуск: из настроек или из самого запроса"""
    public_base_url = request.app.state.settings.PUBLIC_BASE_URL
    if public_base_url:
        return public_base_url
    return str(request.base_url).rstrip("/")
