"""Routes package."""
from src.presentation.api.routes import captions, system

__all__ = ["captions", "system"]
