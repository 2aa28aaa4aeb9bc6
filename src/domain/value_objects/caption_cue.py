"""
Value Objects: TranscriptSegment e CaptionCue

TranscriptSegment é o segmento como o upstream entrega (offsets em ms).
CaptionCue é a legenda normalizada devolvida aos clientes (segundos).
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class TranscriptSegment:
    """Segmento de transcrição do upstream, com offsets em milissegundos."""

    start_ms: int
    duration_ms: int
    text: str

    @classmethod
    def from_seconds(cls, start: float, duration: float, text: str) -> "TranscriptSegment":
        """Cria segmento a partir de offsets em segundos."""
        return cls(
            start_ms=int(round(start * 1000)),
            duration_ms=int(round(duration * 1000)),
            text=text or ""
        )


@dataclass(frozen=True)
class CaptionCue:
    """Legenda normalizada: início/fim em segundos, texto e idioma."""

    start: float
    end: float
    text: str
    lang: str

    @classmethod
    def from_segment(cls, segment: TranscriptSegment, lang: str) -> "CaptionCue":
        """Converte segmento do upstream (ms) para cue (segundos)."""
        return cls(
            start=segment.start_ms / 1000,
            end=(segment.start_ms + segment.duration_ms) / 1000,
            text=segment.text,
            lang=lang
        )

    @property
    def duration(self) -> float:
        """Retorna a duração da legenda em segundos."""
        return self.end - self.start

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dict."""
        return asdict(self)
