"""
Testes unitários para o value object VideoId.
"""
import pytest

from src.domain.exceptions import ValidationError
from src.domain.value_objects import VideoId


class TestVideoId:
    """Testes para o value object VideoId."""

    def test_create_valid_video_id(self):
        """Deve aceitar ID de 11 caracteres do YouTube."""
        video_id = VideoId.create("dQw4w9WgXcQ")

        assert video_id.value == "dQw4w9WgXcQ"
        assert str(video_id) == "dQw4w9WgXcQ"

    def test_accepts_dash_and_underscore(self):
        assert VideoId.create("a-b_c-d_e-f").value == "a-b_c-d_e-f"

    def test_strips_surrounding_whitespace(self):
        assert VideoId.create("  dQw4w9WgXcQ ").value == "dQw4w9WgXcQ"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_video_id_raises_error(self, raw):
        """Deve lançar ValidationError para ID ausente."""
        with pytest.raises(ValidationError, match="Video ID is required"):
            VideoId.create(raw)

    @pytest.mark.parametrize("raw", ["abc", "dQw4w9WgXcQX", "dQw4w9WgX!Q", "../etc/pass"])
    def test_invalid_video_id_raises_error(self, raw):
        """Deve lançar ValidationError para ID fora do formato."""
        with pytest.raises(ValidationError, match="Invalid video ID"):
            VideoId.create(raw)

    def test_video_id_is_immutable(self):
        """VideoId deve ser imutável."""
        video_id = VideoId.create("dQw4w9WgXcQ")

        with pytest.raises(Exception):  # dataclass frozen=True
            video_id.value = "other"
