"""Value objects package."""
from src.domain.value_objects.video_id import VideoId
from src.domain.value_objects.caption_cue import CaptionCue, TranscriptSegment

__all__ = ["VideoId", "CaptionCue", "TranscriptSegment"]
