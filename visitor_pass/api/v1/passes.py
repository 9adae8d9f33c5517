import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from visitor_pass.api.deps import get_base_url, get_pass_service
from visitor_pass.errors import InvalidRequest
from visitor_pass.schemas.pass_schema import ErrorResponse, PassCreate, PassCreateResponse
from visitor_pass.services.passes import PassService

router = APIRouter()
logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/create",
    response_model=PassCreateResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def create_pass(
    pass_data: PassCreate,
    base_url: str = Depends(get_base_url),
    service: PassService = Depends(get_pass_service),
):
    """Создать пропуск посетителя и вернуть ссылку на него"""
    try:
        created = service.create(pass_data, base_url)
    except InvalidRequest as e:
        logger.info(f"Отклонен запрос на пропуск: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception:
        logger.exception("Ошибка при создании пропуска")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    return PassCreateResponse(
        request_id=created.record.request_id,
        pass_url=created.pass_url,
        expires_at=created.record.expires_at.isoformat(),
    )
