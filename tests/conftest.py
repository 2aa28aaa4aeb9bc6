"""
Configuração do pytest e fixtures compartilhadas - Captions Service
"""
import pytest
from unittest.mock import AsyncMock, Mock

from fastapi.testclient import TestClient

from src.domain.entities import Transcript
from src.domain.interfaces import ITranscriptProvider
from src.domain.value_objects import TranscriptSegment
from src.infrastructure.cache import TTLStore
from src.presentation.api.dependencies import Container
from src.presentation.api.main import app
from src.presentation.api.rate_limit import limiter


@pytest.fixture(autouse=True)
def reset_state():
    """Isola cada teste: singletons e contadores de rate limit zerados."""
    Container.reset()
    limiter.reset()
    yield
    Container.reset()
    limiter.reset()


@pytest.fixture
def video_id() -> str:
    """ID de vídeo do YouTube válido"""
    return "dQw4w9WgXcQ"


def segment_from_payload(payload) -> TranscriptSegment:
    """Segmento a partir do payload bruto do upstream: {"start_ms", "duration_ms", "snippet": {"text"}}"""
    snippet = payload.get("snippet") or {}
    return TranscriptSegment(
        start_ms=int(payload.get("start_ms", 0)),
        duration_ms=int(payload.get("duration_ms", 0)),
        text=snippet.get("text") or ""
    )


class FakeClock:
    """Relógio controlável para testar expiração de TTL."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_segment():
    return segment_from_payload


@pytest.fixture
def sample_transcript(video_id) -> Transcript:
    """Transcrição de exemplo no formato do upstream"""
    return Transcript(
        video_id=video_id,
        language_code="en",
        segments=[
            segment_from_payload({"start_ms": 0, "duration_ms": 1000, "snippet": {"text": "Hi"}}),
            segment_from_payload({"start_ms": 1000, "duration_ms": 2500, "snippet": {"text": "there"}})
        ]
    )



@pytest.fixture
def transcript_provider(sample_transcript):
    """Mock do cliente do upstream"""
    provider = Mock(spec=ITranscriptProvider)
    provider.fetch_transcript = AsyncMock(return_value=sample_transcript)
    return provider


@pytest.fixture
def captions_cache() -> TTLStore:
    return TTLStore(namespace="captions", ttl_seconds=24 * 60 * 60)


@pytest.fixture
def error_cache() -> TTLStore:
    return TTLStore(namespace="captions-error", ttl_seconds=5 * 60)


@pytest.fixture
def client(transcript_provider, captions_cache, error_cache):
    """Cliente de teste FastAPI com upstream mockado"""
    Container.override(
        transcript_provider=transcript_provider,
        captions_cache=captions_cache,
        error_cache=error_cache
    )
    return TestClient(app)
