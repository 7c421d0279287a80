"""Tests for preferred-title resolution."""
import pytest

from cultured_renamer.core.config import RenamerConfig
from cultured_renamer.core.errors import NoEpisodeTitleError
from cultured_renamer.core.models import Title, TitleLanguage, TitleType
from cultured_renamer.engine.titles import (
    resolve_episode_title,
    resolve_title,
    series_title,
)

from .fixtures import make_series

EN = TitleLanguage.ENGLISH
RO = TitleLanguage.ROMAJI
JA = TitleLanguage.JAPANESE
OFFICIAL = TitleType.OFFICIAL


class TestResolveTitle:
    """Tests for resolve_title."""

    def test_first_language_wins(self):
        titles = (
            Title("Shingeki no Kyojin", RO, OFFICIAL),
            Title("Attack on Titan", EN, OFFICIAL),
        )
        assert resolve_title(titles, OFFICIAL, [EN, RO], "x") == "Attack on Titan"

    def test_later_language_does_not_override(self):
        """A match for English must not be replaced by a later Romaji match."""
        titles = (
            Title("Attack on Titan", EN, OFFICIAL),
            Title("Shingeki no Kyojin", RO, OFFICIAL),
        )
        assert resolve_title(titles, OFFICIAL, [EN, RO], "x") == "Attack on Titan"

    def test_falls_through_to_second_language(self):
        titles = (Title("Shingeki no Kyojin", RO, OFFICIAL),)
        assert resolve_title(titles, OFFICIAL, [EN, RO], "x") == "Shingeki no Kyojin"

    def test_type_filter(self):
        titles = (
            Title("AoT", EN, TitleType.SHORT),
            Title("Shingeki no Kyojin", RO, OFFICIAL),
        )
        assert resolve_title(titles, OFFICIAL, [EN, RO], "x") == "Shingeki no Kyojin"

    def test_first_in_scan_order_wins_ties(self):
        titles = (
            Title("First", EN, OFFICIAL),
            Title("Second", EN, OFFICIAL),
        )
        assert resolve_title(titles, OFFICIAL, [EN], "x") == "First"

    def test_fallback(self):
        titles = (Title("進撃の巨人", JA, OFFICIAL),)
        assert resolve_title(titles, OFFICIAL, [EN, RO], "Preferred") == "Preferred"

    def test_empty_titles_fallback(self):
        assert resolve_title((), OFFICIAL, [EN], "Preferred") == "Preferred"

    def test_non_matching_order_irrelevant(self):
        """Reordering entries that don't match never changes the result."""
        target = Title("Target", RO, OFFICIAL)
        noise = (
            Title("A", JA, OFFICIAL),
            Title("B", EN, TitleType.SHORT),
            Title("C", TitleLanguage.GERMAN, OFFICIAL),
        )
        orders = [
            noise + (target,),
            (target,) + noise,
            noise[::-1] + (target,),
            (noise[1], target, noise[2], noise[0]),
        ]
        results = {resolve_title(t, OFFICIAL, [EN, RO], "x") for t in orders}
        assert results == {"Target"}


class TestResolveEpisodeTitle:
    """Tests for resolve_episode_title."""

    def test_preferred_language(self):
        titles = (Title("Hajimari", RO), Title("The Beginning", EN))
        assert resolve_episode_title(titles, [EN, RO]) == "The Beginning"

    def test_ignores_type(self):
        titles = (Title("Short", EN, TitleType.SHORT),)
        assert resolve_episode_title(titles, [EN]) == "Short"

    def test_first_available_fallback(self):
        titles = (Title("始まり", JA), Title("Anfang", TitleLanguage.GERMAN))
        assert resolve_episode_title(titles, [EN, RO]) == "始まり"

    def test_no_titles(self):
        with pytest.raises(NoEpisodeTitleError):
            resolve_episode_title((), [EN, RO])


class TestSeriesTitle:

    def test_uses_config_languages(self):
        series = make_series(titles=(
            Title("Attack on Titan", EN, OFFICIAL),
            Title("Shingeki no Kyojin", RO, OFFICIAL),
        ))
        config = RenamerConfig(preferred_languages=(RO, EN))
        assert series_title(series, config) == "Shingeki no Kyojin"

    def test_preferred_title_fallback(self):
        series = make_series(titles=(), preferred_title="Host Title")
        assert series_title(series, RenamerConfig()) == "Host Title"
