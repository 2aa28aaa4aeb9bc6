"""Domain interfaces package."""
from src.domain.interfaces.transcript_provider import ITranscriptProvider
from src.domain.interfaces.cache_store import ICacheStore

__all__ = ["ITranscriptProvider", "ICacheStore"]
