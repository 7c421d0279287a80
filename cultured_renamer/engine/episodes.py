"""Episode label formatting: prefix + zero-padded number."""
from __future__ import annotations

from ..core.errors import UnrecognizedEpisodeCategoryError
from ..core.models import EpisodeCounts, EpisodeInfo, EpisodeType, SeriesInfo


def pad_number(number: int, total: int) -> str:
    """Zero-pad number to the digit width of total (at least one digit)."""
    width = len(str(abs(total)))
    return str(number).zfill(width)


def _prefix_and_total(episode_type: EpisodeType, counts: EpisodeCounts) -> tuple[str, int]:
    match episode_type:
        case EpisodeType.EPISODE:
            return "", counts.episodes
        case EpisodeType.CREDITS:
            return "C", counts.credits
        case EpisodeType.SPECIAL:
            return "S", counts.specials
        case EpisodeType.TRAILER:
            return "T", counts.trailers
        case EpisodeType.PARODY:
            return "P", counts.parodies
        case EpisodeType.OTHER:
            return "", counts.others
        case EpisodeType.UNKNOWN:
            return "U", counts.others
        case _:
            raise UnrecognizedEpisodeCategoryError(
                f"Unhandled episode type {episode_type!r}"
            )


def format_episode_label(episode: EpisodeInfo, series: SeriesInfo) -> str:
    """Build the episode label, e.g. ``03``, ``S1`` or ``C02``.

    Movies have no label and yield an empty string.
    """
    if series.is_movie:
        return ""
    prefix, total = _prefix_and_total(episode.type, series.episode_counts)
    return f"{prefix}{pad_number(episode.episode_number, total)}"
