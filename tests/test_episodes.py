"""Tests for episode label formatting."""
import pytest

from cultured_renamer.core.errors import UnrecognizedEpisodeCategoryError
from cultured_renamer.core.models import (
    EpisodeCounts,
    EpisodeInfo,
    EpisodeType,
    SeriesType,
)
from cultured_renamer.engine.episodes import format_episode_label, pad_number

from .fixtures import make_episode, make_series


class TestPadNumber:
    """Tests for pad_number."""

    @pytest.mark.parametrize("number,total,expected", [
        (3, 12, "03"),
        (3, 9, "3"),
        (3, 100, "003"),
        (0, 12, "00"),
        (12, 12, "12"),
        (7, 0, "7"),
        (0, 0, "0"),
        (123, 12, "123"),
    ])
    def test_pad(self, number, total, expected):
        assert pad_number(number, total) == expected

    @pytest.mark.parametrize("total", [1, 9, 10, 99, 100, 1000, 25000])
    def test_width_matches_digits(self, total):
        for number in (0, 1, total):
            assert len(pad_number(number, total)) == len(str(total))


class TestFormatEpisodeLabel:
    """Tests for format_episode_label."""

    COUNTS = EpisodeCounts(
        episodes=24, credits=3, specials=12, trailers=100, parodies=1, others=10,
    )

    @pytest.mark.parametrize("episode_type,expected", [
        (EpisodeType.EPISODE, "05"),
        (EpisodeType.CREDITS, "C5"),
        (EpisodeType.SPECIAL, "S05"),
        (EpisodeType.TRAILER, "T005"),
        (EpisodeType.PARODY, "P5"),
        (EpisodeType.OTHER, "05"),
        (EpisodeType.UNKNOWN, "U05"),
    ])
    def test_prefix_table(self, episode_type, expected):
        series = make_series(counts=self.COUNTS)
        episode = make_episode(5, type=episode_type)
        assert format_episode_label(episode, series) == expected

    def test_movie_has_no_label(self):
        series = make_series(type=SeriesType.MOVIE)
        assert format_episode_label(make_episode(1), series) == ""

    def test_ova_has_label(self):
        series = make_series(type=SeriesType.OVA, counts=EpisodeCounts(episodes=2))
        assert format_episode_label(make_episode(1), series) == "1"

    def test_unhandled_type(self):
        episode = EpisodeInfo(episode_number=1, type="Recap")
        with pytest.raises(UnrecognizedEpisodeCategoryError, match="Unhandled episode type"):
            format_episode_label(episode, make_series())
