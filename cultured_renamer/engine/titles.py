"""Preferred-title resolution."""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.config import RenamerConfig
from ..core.errors import NoEpisodeTitleError
from ..core.models import SeriesInfo, Title, TitleLanguage, TitleType


def _first_match(
    titles: Sequence[Title],
    languages: Iterable[TitleLanguage],
    title_type: Optional[TitleType],
) -> Optional[str]:
    # The first language with any match wins, later languages never override it
    for language in languages:
        for title in titles:
            if title.language != language:
                continue
            if title_type is not None and title.type != title_type:
                continue
            return title.text
    return None


def resolve_title(
    titles: Sequence[Title],
    title_type: TitleType,
    languages: Iterable[TitleLanguage],
    fallback: str,
) -> str:
    """Get a title by language preference. Order matters.

    Args:
        titles: Titles to search, in host order.
        title_type: Only titles of this type are considered.
        languages: Languages to try, most preferred first.
        fallback: Returned when no language yields a title.

    Returns:
        Text of the first title found for the highest-priority language.
    """
    found = _first_match(titles, languages, title_type)
    return found if found is not None else fallback


def resolve_episode_title(
    titles: Sequence[Title],
    languages: Iterable[TitleLanguage],
) -> str:
    """Get an episode title by language preference, regardless of title type.

    Falls back to the first available title.

    Raises:
        NoEpisodeTitleError: The episode has no titles at all.
    """
    found = _first_match(titles, languages, None)
    if found is not None:
        return found
    if not titles:
        raise NoEpisodeTitleError()
    return titles[0].text


def series_title(series: SeriesInfo, config: RenamerConfig) -> str:
    """Official series title in the preferred language, else the host's preferred title."""
    return resolve_title(
        series.titles,
        TitleType.OFFICIAL,
        config.preferred_languages,
        series.preferred_title,
    )
