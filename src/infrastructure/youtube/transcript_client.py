"""
YouTube Transcript Client.
Cliente do upstream que obtém transcrições via youtube-transcript-api.

O cliente da biblioteca (e sua sessão HTTP) é criado uma única vez, de forma
lazy, e reutilizado por todas as requisições.
"""
import asyncio
import threading
from typing import Any, Callable, Optional

from loguru import logger
from youtube_transcript_api import (
    YouTubeTranscriptApi,
    TranscriptsDisabled,
    NoTranscriptFound,
    VideoUnavailable
)
from youtube_transcript_api.proxies import GenericProxyConfig

from src.domain.entities import Transcript
from src.domain.exceptions import TranscriptNotFoundError
from src.domain.interfaces import ITranscriptProvider
from src.domain.value_objects import TranscriptSegment


# Erros do upstream que significam "vídeo sem transcrição"
UNAVAILABLE_ERRORS = (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable)


class YouTubeTranscriptClient(ITranscriptProvider):
    """
    Provedor de transcrições do YouTube.

    Seleção de faixa: idioma pedido (ou o padrão); se não existir,
    a primeira faixa disponível (manuais antes das automáticas).
    """

    def __init__(
        self,
        default_language: str = "en",
        proxy_url: str = "",
        api_factory: Optional[Callable[[], Any]] = None
    ):
        """
        Inicializa o cliente.

        Args:
            default_language: Idioma usado quando a requisição não especifica um
            proxy_url: Proxy HTTP(S) opcional para acessar o YouTube
            api_factory: Construtor do cliente da biblioteca (injeção para testes)
        """
        self.default_language = default_language
        self.proxy_url = proxy_url
        self._api_factory = api_factory or self._create_api

        self._api = None
        self._api_lock = threading.Lock()

    def _create_api(self) -> YouTubeTranscriptApi:
        proxy_config = None
        if self.proxy_url:
            proxy_config = GenericProxyConfig(
                http_url=self.proxy_url,
                https_url=self.proxy_url
            )
            logger.info("YouTube transcript client using proxy")
        return YouTubeTranscriptApi(proxy_config=proxy_config)

    def get_api(self):
        """Retorna o cliente da biblioteca, criando-o na primeira chamada."""
        if self._api is None:
            with self._api_lock:
                if self._api is None:
                    logger.info("Initializing YouTube transcript client")
                    self._api = self._api_factory()
        return self._api

    async def fetch_transcript(self, video_id: str, language: Optional[str] = None) -> Transcript:
        """
        Obtém a transcrição do vídeo no upstream.

        Raises:
            TranscriptNotFoundError: Transcrições desabilitadas, inexistentes
                ou vídeo indisponível
        """
        requested = language or self.default_language
        logger.info(f"Fetching transcript for video: {video_id} (lang: {requested})")

        try:
            transcript = await asyncio.to_thread(self._fetch, video_id, requested)
        except UNAVAILABLE_ERRORS as e:
            logger.warning(f"Transcript not available for {video_id}: {type(e).__name__}")
            raise TranscriptNotFoundError(video_id, reason=type(e).__name__) from e

        logger.info(
            f"Transcript fetched: {video_id} "
            f"(lang: {transcript.language_code}, segments: {len(transcript.segments)})"
        )
        return transcript

    def _fetch(self, video_id: str, language: str) -> Transcript:
        api = self.get_api()

        # Metadados: faixas disponíveis para o vídeo
        transcript_list = api.list(video_id)

        try:
            track = transcript_list.find_transcript([language])
        except NoTranscriptFound:
            track = next(iter(transcript_list), None)
            if track is None:
                raise TranscriptNotFoundError(video_id)
            logger.debug(
                f"No '{language}' track for {video_id}, "
                f"falling back to '{track.language_code}'"
            )

        fetched = track.fetch()

        segments = [
            TranscriptSegment.from_seconds(snippet.start, snippet.duration, snippet.text)
            for snippet in fetched
        ]

        return Transcript(
            video_id=video_id,
            language_code=getattr(fetched, "language_code", None) or track.language_code,
            segments=segments
        )
