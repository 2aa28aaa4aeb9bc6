"""Use cases package."""
from src.application.use_cases.get_captions import GetCaptionsUseCase

__all__ = ["GetCaptionsUseCase"]
