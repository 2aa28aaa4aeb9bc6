"""YouTube infrastructure module."""
from src.infrastructure.youtube.transcript_client import YouTubeTranscriptClient

__all__ = ['YouTubeTranscriptClient']
