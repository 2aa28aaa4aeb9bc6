"""
DTOs (Data Transfer Objects) para a camada de aplicação.
Seguem o princípio de separação de responsabilidades.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class CaptionCueDTO(BaseModel):
    """DTO para uma legenda normalizada."""

    start: float = Field(..., description="Tempo inicial em segundos", ge=0)
    end: float = Field(..., description="Tempo final em segundos", ge=0)
    text: str = Field(..., description="Texto da legenda")
    lang: str = Field(..., description="Código do idioma da faixa")


class HealthCheckDTO(BaseModel):
    """DTO para health check."""

    status: str = Field(default="ok", description="Status da API")
    timestamp: datetime = Field(..., description="Horário atual (ISO 8601, UTC)")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "ok",
                "timestamp": "2025-03-10T14:19:58.123Z"
            }
        }


class ErrorResponseDTO(BaseModel):
    """DTO para respostas de erro."""

    error: str = Field(..., description="Código do erro")
    message: str = Field(..., description="Mensagem do erro")
    retryAfter: Optional[int] = Field(
        None,
        description="Segundos a aguardar antes de tentar novamente (apenas 429)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "error": "TooManyRequests",
                "message": "Captions temporarily unavailable. Please try again later.",
                "retryAfter": 300
            }
        }
