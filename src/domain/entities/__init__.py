"""Domain entities package."""
from src.domain.entities.transcript import Transcript

__all__ = ["Transcript"]
