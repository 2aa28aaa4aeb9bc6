"""DTOs package."""
from src.application.dtos.caption_dtos import (
    CaptionCueDTO,
    HealthCheckDTO,
    ErrorResponseDTO
)

__all__ = [
    "CaptionCueDTO",
    "HealthCheckDTO",
    "ErrorResponseDTO"
]
