import logging
from datetime import datetime
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from visitor_pass.api.deps import get_base_url, get_pass_service, get_qr_options
from visitor_pass.errors import PassNotFound
from visitor_pass.services.passes import PassService
from visitor_pass.services.qr import QrOptions, render_qr_data_url

router = APIRouter()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def format_pass_date(value: datetime) -> str:
    """Oct 18, 2026"""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def format_pass_time(value: datetime) -> str:
    """01:53 PM"""
    return value.strftime("%I:%M %p")


def error_page(request: Request, message: str, status_code: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"message": message},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def index(request: Request, base_url: str = Depends(get_base_url)):
    """Страница статуса сервиса с примером запроса"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"create_url": f"{base_url}/api/pass/create"},
    )


@router.get("/pass/{key:path}", response_class=HTMLResponse)
def view_pass(
    key: str,
    request: Request,
    service: PassService = Depends(get_pass_service),
    qr_options: QrOptions = Depends(get_qr_options),
):
    """Страница-билет пропуска с QR-кодом"""
    # Ключ приходит уже раскодированным, в нем могут быть "/" и "?"
    try:
        record, expired = service.get(key)
        qr_code = render_qr_data_url(record.request_id, qr_options)
        created_at = record.created_at.astimezone(service.tz)
        return templates.TemplateResponse(
            request,
            "pass.html",
            {
                "record": record,
                "expired": expired,
                "qr_code": qr_code,
                "created_date": format_pass_date(created_at),
                "created_time": format_pass_time(created_at),
                "valid_from": record.valid_from.astimezone(service.tz).strftime("%Y-%m-%d %H:%M"),
                "valid_to": record.valid_to.astimezone(service.tz).strftime("%Y-%m-%d %H:%M"),
            },
        )
    except PassNotFound:
        logger.info(f"Запрошен несуществующий пропуск: key={key}")
        return error_page(request, "Pass not found or has expired", status.HTTP_404_NOT_FOUND)
    except Exception:
        # RenderFailure, даты вне диапазона и прочее: детали только в логе
        logger.exception(f"Ошибка при отображении пропуска: key={key}")
        return error_page(request, "Unable to load visitor pass", status.HTTP_500_INTERNAL_SERVER_ERROR)
