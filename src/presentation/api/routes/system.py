"""
Rotas de sistema.
Health check e informações da API.
"""
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import APIRouter, Request
from loguru import logger

from src.config import settings
from src.application.dtos import HealthCheckDTO

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=HealthCheckDTO,
    summary="Health check",
    description="Liveness probe. Never rate limited."
)
async def health_check(request: Request) -> HealthCheckDTO:
    """Retorna status estático e o horário atual."""
    logger.debug(f"Health check performed: {getattr(request.state, 'request_id', 'unknown')}")
    return HealthCheckDTO(status="ok", timestamp=datetime.now(timezone.utc))


root_router = APIRouter(tags=["System"])


@root_router.get("/", summary="API information")
async def root() -> Dict[str, Any]:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs"
    }
