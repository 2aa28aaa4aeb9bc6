"""
Use Case: Get Captions
Retorna as legendas normalizadas de um vídeo, consultando primeiro o cache
de legendas, depois o cache de falhas e só então o upstream.
Segue o princípio de Single Responsibility (SOLID).
"""
from typing import List, Optional, Tuple
from loguru import logger

from src.domain.interfaces import ICacheStore, ITranscriptProvider
from src.domain.value_objects import CaptionCue, VideoId
from src.domain.exceptions import (
    DomainException,
    InternalError,
    ThrottledError,
    TranscriptNotFoundError
)


class GetCaptionsUseCase:
    """
    Use Case para obter legendas de um vídeo do YouTube.

    Fluxo por requisição:
    1. Valida o ID do vídeo
    2. Cache de legendas (hit → retorna sem chamar o upstream)
    3. Cache de falhas (hit → ThrottledError com retry fixo)
    4. Upstream; "sem transcrição" vai para o cache de falhas
    5. Normaliza, grava no cache de legendas e retorna
    """

    def __init__(
        self,
        transcript_provider: ITranscriptProvider,
        captions_cache: ICacheStore,
        error_cache: ICacheStore,
        error_retry_after: int = 300
    ):
        """
        Inicializa o use case.

        Args:
            transcript_provider: Cliente compartilhado do upstream
            captions_cache: Cache de legendas obtidas com sucesso
            error_cache: Cache de vídeos sem transcrição
            error_retry_after: Segundos sugeridos ao cliente após falha em cache
        """
        self.transcript_provider = transcript_provider
        self.captions_cache = captions_cache
        self.error_cache = error_cache
        self.error_retry_after = error_retry_after

    async def execute(
        self,
        raw_video_id: Optional[str],
        language: Optional[str] = None
    ) -> List[CaptionCue]:
        """
        Executa a busca de legendas.

        Args:
            raw_video_id: ID do vídeo recebido na requisição
            language: Código do idioma desejado (opcional)

        Returns:
            List[CaptionCue]: Legendas na ordem do upstream

        Raises:
            ValidationError: ID ausente ou inválido
            ThrottledError: Falha recente registrada para o vídeo
            TranscriptNotFoundError: Upstream sem transcrição
            InternalError: Qualquer outra falha
        """
        video_id = VideoId.create(raw_video_id)
        cache_key = self._build_cache_key(video_id.value, language)

        cached: Optional[Tuple[CaptionCue, ...]] = await self.captions_cache.get(cache_key)
        if cached is not None:
            logger.info(f"Serving cached captions: {cache_key} ({len(cached)} cues)")
            return list(cached)

        if await self.error_cache.get(video_id.value):
            logger.info(f"Captions recently unavailable, short-circuiting: {video_id}")
            raise ThrottledError(
                retry_after=self.error_retry_after,
                message="Captions temporarily unavailable. Please try again later."
            )

        try:
            transcript = await self.transcript_provider.fetch_transcript(video_id.value, language)
        except TranscriptNotFoundError:
            await self.error_cache.set(video_id.value, True)
            logger.warning(f"No transcript for {video_id}, cached as failure")
            raise
        except DomainException:
            raise
        except Exception as e:
            logger.exception(f"Error fetching transcript for {video_id}: {type(e).__name__}")
            raise InternalError("Failed to fetch captions.") from e

        cues = tuple(transcript.to_cues())
        await self.captions_cache.set(cache_key, cues)

        logger.info(f"Captions cached: {cache_key} ({len(cues)} cues)")
        return list(cues)

    @staticmethod
    def _build_cache_key(video_id: str, language: Optional[str]) -> str:
        return f"captions:{video_id}:{language or 'default'}"
