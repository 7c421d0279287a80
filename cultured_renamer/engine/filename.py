"""File name assembly.

The name is built by a fixed sequence of steps. Each step takes the
parts collected so far and returns a new tuple; nothing is mutated.

    My Show - 03 - The Beginning[ensub][10bit][HEVC][GRP].mkv
"""
from __future__ import annotations

import logging
from typing import Callable

from ..core.config import RenamerConfig
from ..core.errors import EmptyFileNameError
from ..core.models import RelocationContext
from .episodes import format_episode_label
from .sanitize import replace_invalid_path_characters
from .titles import resolve_episode_title, series_title


logger = logging.getLogger(__name__)

Parts = tuple[str, ...]
NameStep = Callable[[Parts, RelocationContext, RenamerConfig], Parts]

MULTISUB_TAG = "[MULTISUB]"


def _series_title(parts: Parts, ctx: RelocationContext, config: RenamerConfig) -> Parts:
    return parts + (series_title(ctx.anime, config),)


def _episode_label(parts: Parts, ctx: RelocationContext, config: RenamerConfig) -> Parts:
    if ctx.anime.is_movie:
        return parts
    return parts + (f" - {format_episode_label(ctx.episode, ctx.anime)}",)


def _episode_title(parts: Parts, ctx: RelocationContext, config: RenamerConfig) -> Parts:
    title = resolve_episode_title(ctx.episode.titles, config.preferred_languages)
    return parts + (f" - {title}",)


def _subtitles(parts: Parts, ctx: RelocationContext, config: RenamerConfig) -> Parts:
    streams = ctx.file.stream_info.text_streams
    if not streams:
        return parts
    if len(streams) > 1:
        return parts + (MULTISUB_TAG,)
    return parts + (f"[{streams[0].language_code}sub]",)


def _bit_depth(parts: Parts, ctx: RelocationContext, config: RenamerConfig) -> Parts:
    return parts + (f"[{ctx.file.stream_info.video_stream.bit_depth}bit]",)


def _codec(parts: Parts, ctx: RelocationContext, config: RenamerConfig) -> Parts:
    codec = ctx.file.stream_info.video_stream.codec
    if codec is None or not codec.name:
        return parts
    return parts + (f"[{codec.name}]",)


def _release_group(parts: Parts, ctx: RelocationContext, config: RenamerConfig) -> Parts:
    group = ctx.file.release_group_name
    if not group:
        return parts
    return parts + (f"[{group}]",)


def _extension(parts: Parts, ctx: RelocationContext, config: RenamerConfig) -> Parts:
    return parts + (ctx.file.extension,)


NAME_STEPS: tuple[NameStep, ...] = (
    _series_title,
    _episode_label,
    _episode_title,
    _subtitles,
    _bit_depth,
    _codec,
    _release_group,
    _extension,
)


def build_file_name(ctx: RelocationContext, config: RenamerConfig) -> str:
    """Build the new file name for the file in ctx.

    Args:
        ctx: Relocation context.
        config: Renamer configuration.

    Returns:
        Sanitized file name including the original extension.

    Raises:
        NoEpisodeTitleError: The episode has no titles.
        UnrecognizedEpisodeCategoryError: Episode type can't be labelled.
        EmptyFileNameError: Nothing usable was assembled.
    """
    logger.debug("Setting filename for %s", ctx.file.file_name)

    parts: Parts = ()
    for step in NAME_STEPS:
        parts = step(parts, ctx, config)

    name = replace_invalid_path_characters("".join(parts))
    if not name.strip():
        raise EmptyFileNameError()
    return name
