"""
Value Object: VideoId
Representa um identificador de vídeo do YouTube validado.
Segue o princípio de Value Object do DDD.
"""
from dataclasses import dataclass
import re

from src.domain.exceptions import ValidationError


@dataclass(frozen=True)
class VideoId:
    """Value Object que representa um ID de vídeo válido do YouTube."""

    value: str

    _VIDEO_ID_REGEX = re.compile(r"^[A-Za-z0-9_-]{11}$")

    def __post_init__(self) -> None:
        """Valida o ID após inicialização."""
        if not self.value or not self.value.strip():
            raise ValidationError("Video ID is required")
        if not self._VIDEO_ID_REGEX.match(self.value):
            raise ValidationError(f"Invalid video ID: {self.value}")

    @classmethod
    def create(cls, raw: str | None) -> "VideoId":
        """Factory method para criar VideoId a partir da entrada bruta."""
        return cls(value=(raw or "").strip())

    def __str__(self) -> str:
        return self.value
