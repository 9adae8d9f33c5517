from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class PassCreate(BaseModel):
    """Тело запроса POST /api/pass/create (поля в camelCase)"""
    # Обязательность requestId проверяет сервис, чтобы вернуть 400, а не 422
    request_id: Optional[str] = Field(None, alias="requestId")
    visitor_name: Optional[str] = Field(None, alias="visitorName")
    visitor_email: Optional[str] = Field(None, alias="visitorEmail")
    visitor_phone: Optional[str] = Field(None, alias="visitorPhone")
    host_name: Optional[str] = Field(None, alias="hostName")
    location: Optional[str] = None
    purpose: Optional[str] = None
    valid_from: Optional[datetime] = Field(None, alias="validFrom")
    valid_to: Optional[datetime] = Field(None, alias="validTo")

    class Config:
        populate_by_name = True


class PassCreateResponse(BaseModel):
    success: bool = True
    request_id: str = Field(alias="requestId")
    pass_url: str = Field(alias="passUrl")
    expires_at: str = Field(alias="expiresAt")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    passes: int
