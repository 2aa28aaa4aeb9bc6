"""
Dependency Injection Container.
Gerencia a criação e injeção de dependências seguindo SOLID.

IMPORTANTE: Todos os serviços são SINGLETON. Os caches e o cliente do
upstream vivem no processo e são compartilhados por todas as requisições.
"""
import threading

from loguru import logger
from src.config import settings
from src.domain.interfaces import ICacheStore, ITranscriptProvider
from src.infrastructure.cache import TTLStore
from src.infrastructure.youtube import YouTubeTranscriptClient
from src.application.use_cases import GetCaptionsUseCase


class Container:
    """
    Container de injeção de dependências com SINGLETON pattern.

    Serviços são criados UMA VEZ (lazy) e reutilizados em todas as requisições.
    """

    _captions_cache: ICacheStore = None
    _error_cache: ICacheStore = None
    _transcript_provider: ITranscriptProvider = None
    _captions_use_case: GetCaptionsUseCase = None
    _lock = threading.Lock()

    @classmethod
    def get_captions_cache(cls) -> ICacheStore:
        """Cache de legendas obtidas com sucesso (TTL longo)."""
        if cls._captions_cache is None:
            with cls._lock:
                if cls._captions_cache is None:
                    logger.debug("[CONTAINER] Creating captions cache singleton")
                    cls._captions_cache = TTLStore(
                        namespace="captions",
                        ttl_seconds=settings.captions_cache_ttl_seconds
                    )
        return cls._captions_cache

    @classmethod
    def get_error_cache(cls) -> ICacheStore:
        """Cache de vídeos sem transcrição (TTL curto)."""
        if cls._error_cache is None:
            with cls._lock:
                if cls._error_cache is None:
                    logger.debug("[CONTAINER] Creating error cache singleton")
                    cls._error_cache = TTLStore(
                        namespace="captions-error",
                        ttl_seconds=settings.error_cache_ttl_seconds
                    )
        return cls._error_cache

    @classmethod
    def get_transcript_provider(cls) -> ITranscriptProvider:
        """
        Cliente do upstream compartilhado.

        A sessão da biblioteca só é aberta na primeira busca real
        (ver YouTubeTranscriptClient.get_api).
        """
        if cls._transcript_provider is None:
            with cls._lock:
                if cls._transcript_provider is None:
                    logger.debug("[CONTAINER] Creating YouTubeTranscriptClient singleton")
                    cls._transcript_provider = YouTubeTranscriptClient(
                        default_language=settings.default_language,
                        proxy_url=settings.youtube_proxy_url
                    )
        return cls._transcript_provider

    @classmethod
    def get_captions_use_case(cls) -> GetCaptionsUseCase:
        """Use case de legendas ligado aos singletons acima."""
        if cls._captions_use_case is None:
            transcript_provider = cls.get_transcript_provider()
            captions_cache = cls.get_captions_cache()
            error_cache = cls.get_error_cache()
            with cls._lock:
                if cls._captions_use_case is None:
                    cls._captions_use_case = GetCaptionsUseCase(
                        transcript_provider=transcript_provider,
                        captions_cache=captions_cache,
                        error_cache=error_cache,
                        error_retry_after=settings.error_retry_after_seconds
                    )
        return cls._captions_use_case

    @classmethod
    def override(
        cls,
        transcript_provider: ITranscriptProvider = None,
        captions_cache: ICacheStore = None,
        error_cache: ICacheStore = None
    ) -> None:
        """Substitui dependências (usado em testes) e recria o use case."""
        with cls._lock:
            if transcript_provider is not None:
                cls._transcript_provider = transcript_provider
            if captions_cache is not None:
                cls._captions_cache = captions_cache
            if error_cache is not None:
                cls._error_cache = error_cache
            cls._captions_use_case = None

    @classmethod
    def reset(cls) -> None:
        """Descarta todos os singletons."""
        with cls._lock:
            cls._captions_cache = None
            cls._error_cache = None
            cls._transcript_provider = None
            cls._captions_use_case = None


# Funções de dependência para FastAPI
def get_captions_cache() -> ICacheStore:
    return Container.get_captions_cache()


def get_error_cache() -> ICacheStore:
    return Container.get_error_cache()


def get_captions_use_case() -> GetCaptionsUseCase:
    return Container.get_captions_use_case()
