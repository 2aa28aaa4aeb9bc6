"""
Entity: Transcript
Representa a transcrição de um vídeo como retornada pelo upstream.
"""
from dataclasses import dataclass, field
from typing import List

from src.domain.value_objects import CaptionCue, TranscriptSegment


@dataclass
class Transcript:
    """Entidade que representa a transcrição de um vídeo."""

    video_id: str
    language_code: str
    segments: List[TranscriptSegment] = field(default_factory=list)

    def to_cues(self) -> List[CaptionCue]:
        """Normaliza os segmentos em cues, preservando a ordem do upstream."""
        return [
            CaptionCue.from_segment(segment, self.language_code)
            for segment in self.segments
        ]
