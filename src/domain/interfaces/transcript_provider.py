"""
Interface: ITranscriptProvider
Define o contrato para clientes do upstream que fornecem transcrições.
Segue o princípio de Dependency Inversion (SOLID).
"""
from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Transcript


class ITranscriptProvider(ABC):
    """Interface para provedores de transcrição de vídeos."""

    @abstractmethod
    async def fetch_transcript(self, video_id: str, language: Optional[str] = None) -> Transcript:
        """
        Obtém a transcrição de um vídeo.

        Args:
            video_id: ID do vídeo no YouTube
            language: Código do idioma desejado (None usa o padrão)

        Returns:
            Transcript: Transcrição com segmentos em milissegundos

        Raises:
            TranscriptNotFoundError: Se o vídeo não possui transcrição
        """
        pass
